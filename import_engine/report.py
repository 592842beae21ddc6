"""
import_engine.report - Structured result of an import run.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ImportReport:
    inserted: int = 0
    updated: int = 0
    skipped: int = 0

    @property
    def total_rows(self) -> int:
        return self.inserted + self.updated + self.skipped

    def to_dict(self) -> dict:
        return {
            "status": "success",
            "inserted": self.inserted,
            "updated": self.updated,
            "skipped": self.skipped,
        }
