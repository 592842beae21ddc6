"""
db.models - SQLAlchemy ORM declarations.

Tables
------
companies  - one row per unique email.  email is the natural key the
             importer reconciles on; id only fixes listing order.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.orm import DeclarativeBase

from import_engine.records import CompanyRecord


class Base(DeclarativeBase):
    pass


class Company(Base):
    __tablename__ = "companies"

    id       = Column(Integer, primary_key=True, autoincrement=True)

    # ── Natural key ────────────────────────────────────────────────────
    email    = Column(String(320), nullable=False, unique=True, index=True)

    # ── Mergeable fields ───────────────────────────────────────────────
    name     = Column(String(300), nullable=False)
    industry = Column(String(200))
    location = Column(String(200))
    phone    = Column(Float)

    # ── Timestamps ─────────────────────────────────────────────────────
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_record(cls, record: CompanyRecord) -> "Company":
        return cls(
            email=record.email, name=record.name, industry=record.industry,
            location=record.location, phone=record.phone,
        )

    def to_record(self) -> CompanyRecord:
        return CompanyRecord(
            email=self.email, name=self.name, industry=self.industry,
            location=self.location, phone=_phone_out(self.phone),
        )

    # ── Serialisation ──────────────────────────────────────────────────
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "industry": self.industry,
            "location": self.location,
            "email": self.email,
            "phone": _phone_out(self.phone),
            "created_at": self.created_at.isoformat() if self.created_at else "",
        }


def _phone_out(phone):
    if phone is not None and float(phone).is_integer():
        return int(phone)
    return phone
