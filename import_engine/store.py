"""
import_engine.store - What the importer needs from persistence.

The importer receives a store explicitly; it never opens a database
connection of its own.  services.company_service.SqlCompanyStore is the
production implementation.
"""

from __future__ import annotations

from typing import Optional, Protocol

from import_engine.records import CompanyRecord


class CompanyStore(Protocol):

    async def get(self, email: str) -> Optional[CompanyRecord]:
        """Exact-match lookup by email."""
        ...

    async def create(self, record: CompanyRecord) -> None:
        ...

    async def save(self, record: CompanyRecord) -> None:
        """Persist the merged state of the record keyed by record.email."""
        ...
