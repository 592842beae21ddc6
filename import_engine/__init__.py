"""
import_engine - CSV / XLSX company import pipeline.

Public API:
    run_import(content, file_name, import_type, store) → ImportReport
"""

from import_engine.errors import (                      # noqa: F401
    ImportFailure, InvalidPolicySelector, ParseError,
    StoreFailure, UnsupportedFormat,
)
from import_engine.importer import ImportSession, run_import   # noqa: F401
from import_engine.policy import ImportPolicy            # noqa: F401
from import_engine.records import CompanyRecord          # noqa: F401
from import_engine.report import ImportReport            # noqa: F401
