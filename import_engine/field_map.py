"""
import_engine.field_map - Column names understood by the importer.

Header cells are matched exactly (after whitespace trimming) against
the lowercase names below, the same names the record attributes use.
"""

EMAIL_COLUMN = "email"

# Optional text columns copied onto the record when non-empty
TEXT_FIELDS: tuple[str, ...] = ("industry", "location")

# Fields an update may touch, in the order they are merged.
# email is the natural key and is never merged.
MERGE_FIELDS: tuple[str, ...] = ("name", "industry", "location", "phone")
