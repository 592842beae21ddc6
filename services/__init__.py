"""
services - Business-logic layer sitting between API and DB.
"""

from services.company_service import CompanyService, SqlCompanyStore   # noqa: F401
