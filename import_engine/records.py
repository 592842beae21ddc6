"""
import_engine.records - Immutable company record passed through the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

Phone = Union[int, float]


@dataclass(frozen=True)
class CompanyRecord:
    email: str
    name: str
    industry: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[Phone] = None
