"""
import_engine.validator - Validate and normalise one raw row.

Single-responsibility: given a raw row dict, either return a
CompanyRecord ready for reconciliation, or the SkipReason that
keeps it away from the store.
"""

from __future__ import annotations

import enum
import math
import re
from typing import Optional, Union

from import_engine.field_map import EMAIL_COLUMN, TEXT_FIELDS
from import_engine.records import CompanyRecord, Phone

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class SkipReason(enum.Enum):
    INVALID_EMAIL = "invalid_email"
    MISSING_NAME = "missing_name"


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def validate_row(row: dict) -> Union[CompanyRecord, SkipReason]:
    """
    Trim every field, check email then name, coerce phone.

    Optional fields that are missing or blank stay None.
    """
    email = _text(row, EMAIL_COLUMN)
    if not email or not is_valid_email(email):
        return SkipReason.INVALID_EMAIL

    name = _text(row, "name")
    if not name:
        return SkipReason.MISSING_NAME

    optional = {field: _text(row, field) for field in TEXT_FIELDS}
    return CompanyRecord(
        email=email,
        name=name,
        phone=coerce_phone(row.get("phone")),
        **optional,
    )


def coerce_phone(raw) -> Optional[Phone]:
    """
    Return the phone as a number, or None when it is blank or not numeric.

    A phone that fails to coerce is dropped, the row itself is kept.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def _text(row: dict, key: str) -> Optional[str]:
    val = row.get(key)
    if val is None:
        return None
    val = str(val).strip()
    return val or None
