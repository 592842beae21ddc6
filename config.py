"""
CompanyDB - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR   = Path(__file__).resolve().parent
STATIC_DIR = Path(os.environ.get("COMPANYDB_STATIC", BASE_DIR / "frontend" / "dist"))

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get(
    "COMPANYDB_DB", f"sqlite+aiosqlite:///{BASE_DIR / 'companydb.sqlite'}"
)

# ── Server ─────────────────────────────────────────────────────────────
HOST  = os.environ.get("COMPANYDB_HOST", "0.0.0.0")
PORT  = int(os.environ.get("COMPANYDB_PORT", "5000"))
DEBUG = os.environ.get("COMPANYDB_DEBUG", "0") == "1"

# ── Uploads ────────────────────────────────────────────────────────────
MAX_UPLOAD_BYTES  = int(os.environ.get("COMPANYDB_MAX_UPLOAD_MB", "16")) * 1024 * 1024
UPLOAD_FIELD      = "file"
IMPORT_TYPE_FIELD = "importType"

# ── Pagination ─────────────────────────────────────────────────────────
PAGE_SIZE = 10
