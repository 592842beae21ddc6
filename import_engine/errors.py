"""
import_engine.errors - Failures that abort an import run.

Per-row problems are not exceptions; see validator.SkipReason.
"""


class ImportFailure(Exception):
    """Base class for every fatal import error."""


class InvalidPolicySelector(ImportFailure):
    """The import type selector is not one of "1".."5"."""


class UnsupportedFormat(ImportFailure):
    """The uploaded file's extension is neither csv nor xlsx."""


class ParseError(ImportFailure):
    """The uploaded file could not be decoded."""


class StoreFailure(ImportFailure):
    """A lookup, create or save against the company store failed."""
