"""
db.engine - Async engine bootstrap and session factory.

Designed so the connection string can be swapped to Postgres (asyncpg)
by changing config.DB_URL; no other code needs to change.

NullPool: Flask runs every async view on its own event loop, so no
pooled connection may outlive the request that opened it.
"""

from __future__ import annotations

import asyncio

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import NullPool

from db.models import Base

_engine: AsyncEngine | None = None
_SessionLocal: async_sessionmaker | None = None


def init_db(db_url: str) -> None:
    """Create the engine, apply SQLite pragmas, and emit CREATE TABLE."""
    global _engine, _SessionLocal

    _engine = create_async_engine(db_url, echo=False, poolclass=NullPool)

    if "sqlite" in db_url:
        @event.listens_for(_engine.sync_engine, "connect")
        def _sqlite_pragmas(dbapi_conn, _rec):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA journal_mode=WAL")
            cur.execute("PRAGMA synchronous=NORMAL")
            cur.close()

    asyncio.run(_create_tables(_engine))
    _SessionLocal = async_sessionmaker(bind=_engine, expire_on_commit=False)


async def _create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def get_session() -> AsyncSession:
    """Return a new session.  Caller is responsible for closing it."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialised - call init_db() first")
    return _SessionLocal()


def get_session_factory() -> async_sessionmaker:
    """The factory itself, for stores that open one session per call."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialised - call init_db() first")
    return _SessionLocal
