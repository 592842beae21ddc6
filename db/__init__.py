"""
db - Database layer.

Public API:
    init_db()       → create async engine + tables
    get_session()   → new AsyncSession
    get_session_factory() → async_sessionmaker for SqlCompanyStore
    Company         → ORM model
"""

from db.engine import init_db, get_session, get_session_factory   # noqa: F401
from db.models import Base, Company                 # noqa: F401
