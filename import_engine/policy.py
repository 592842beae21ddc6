"""
import_engine.policy - The five import modes offered to the user.
"""

from __future__ import annotations

import enum

from import_engine.errors import InvalidPolicySelector


class ImportPolicy(enum.Enum):
    CREATE_ONLY              = "1"   # Create new only
    CREATE_OR_FILL_MISSING   = "2"   # Create new + update without overwrite
    CREATE_OR_OVERWRITE      = "3"   # Create new + update with overwrite
    UPDATE_ONLY_FILL_MISSING = "4"   # Update existing only, without overwrite
    UPDATE_ONLY_OVERWRITE    = "5"   # Update existing only, with overwrite

    @classmethod
    def from_selector(cls, selector) -> "ImportPolicy":
        """Map the "1".."5" form value onto a policy."""
        try:
            return cls(selector)
        except ValueError:
            raise InvalidPolicySelector(f"Invalid import mode: {selector!r}") from None

    @property
    def creates_new(self) -> bool:
        return self in (
            ImportPolicy.CREATE_ONLY,
            ImportPolicy.CREATE_OR_FILL_MISSING,
            ImportPolicy.CREATE_OR_OVERWRITE,
        )

    @property
    def updates_existing(self) -> bool:
        return self is not ImportPolicy.CREATE_ONLY

    @property
    def overwrites(self) -> bool:
        return self in (
            ImportPolicy.CREATE_OR_OVERWRITE,
            ImportPolicy.UPDATE_ONLY_OVERWRITE,
        )
