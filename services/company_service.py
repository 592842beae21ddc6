"""
services.company_service - Company persistence for the importer and the API.

SqlCompanyStore is the CompanyStore the import engine runs against.  Each
write commits on its own, so rows imported before a failure stay imported.
CompanyService holds the read-side queries used by the listing endpoint;
as in the rest of the services, session management is the caller's job.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from db.models import Company
from import_engine.errors import StoreFailure
from import_engine.records import CompanyRecord

logger = logging.getLogger(__name__)


class SqlCompanyStore:
    """CompanyStore backed by the companies table."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def get(self, email: str) -> Optional[CompanyRecord]:
        try:
            async with self._session_factory() as session:
                company = await _by_email(session, email)
                return company.to_record() if company else None
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Lookup failed for {email}: {exc}") from exc

    async def create(self, record: CompanyRecord) -> None:
        try:
            async with self._session_factory() as session:
                session.add(Company.from_record(record))
                await session.commit()
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Create failed for {record.email}: {exc}") from exc
        logger.debug("Created company %s", record.email)

    async def save(self, record: CompanyRecord) -> None:
        try:
            async with self._session_factory() as session:
                company = await _by_email(session, record.email)
                if company is None:
                    raise StoreFailure(f"Company {record.email} vanished before save")
                company.name = record.name
                company.industry = record.industry
                company.location = record.location
                company.phone = record.phone
                await session.commit()
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Save failed for {record.email}: {exc}") from exc
        logger.debug("Updated company %s", record.email)


async def _by_email(session: AsyncSession, email: str) -> Optional[Company]:
    result = await session.execute(select(Company).where(Company.email == email))
    return result.scalar_one_or_none()


class CompanyService:

    @staticmethod
    async def list_page(
        session: AsyncSession, page: int, page_size: int,
    ) -> list[Company]:
        """Return page *page* (1-based) in insertion order."""
        stmt = (
            select(Company)
            .order_by(Company.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await session.execute(stmt)
        return list(result.scalars())