"""
import_engine.importer - Top-level orchestrator.

Coordinates file_parser → validator → reconciler → store and produces
an ImportReport.

Rows are handled strictly one after another: each row does a lookup
and at most one write, and nothing is cached between rows.  There is
no rollback.  When the store fails part-way through, every row written
before the failure stays written and the StoreFailure propagates to the
caller instead of a report.
"""

from __future__ import annotations

import logging

from import_engine.errors import StoreFailure
from import_engine.file_parser import parse_file
from import_engine.policy import ImportPolicy
from import_engine.reconciler import ActionKind, reconcile
from import_engine.report import ImportReport
from import_engine.store import CompanyStore
from import_engine.validator import SkipReason, validate_row

logger = logging.getLogger(__name__)


class ImportSession:
    """One run of the pipeline over a single uploaded file."""

    def __init__(self, store: CompanyStore, policy: ImportPolicy):
        self.store = store
        self.policy = policy

    async def run(self, content: bytes, file_name: str) -> ImportReport:
        """
        Import *content* and return the counters.

        Raises UnsupportedFormat / ParseError before any row is processed,
        StoreFailure as soon as a store call fails.
        """
        rows = parse_file(content, file_name)
        logger.info("Importing %s with policy %s", file_name, self.policy.name)

        report = ImportReport()
        for row_idx, row in enumerate(rows, start=2):   # row 1 = header
            result = validate_row(row)
            if isinstance(result, SkipReason):
                logger.debug("Row %d skipped: %s", row_idx, result.value)
                report.skipped += 1
                continue

            try:
                kind = await self._apply(result)
            except StoreFailure:
                logger.exception("Import aborted at row %d", row_idx)
                raise

            if kind is ActionKind.CREATE:
                report.inserted += 1
            elif kind is ActionKind.UPDATE:
                report.updated += 1
            else:
                report.skipped += 1

        logger.info(
            "Import of %s done: %d inserted, %d updated, %d skipped",
            file_name, report.inserted, report.updated, report.skipped,
        )
        return report

    async def _apply(self, record) -> ActionKind:
        try:
            existing = await self.store.get(record.email)
            action = reconcile(self.policy, record, existing)
            if action.kind is ActionKind.CREATE:
                await self.store.create(action.record)
            elif action.kind is ActionKind.UPDATE:
                await self.store.save(action.record)
        except StoreFailure:
            raise
        except Exception as exc:
            raise StoreFailure(f"Store error for {record.email}: {exc}") from exc
        return action.kind


async def run_import(
    content: bytes,
    file_name: str,
    import_type: str,
    store: CompanyStore,
) -> ImportReport:
    """
    Import an uploaded csv / xlsx file into *store*.

    Parameters
    ----------
    content : raw file bytes
    file_name : original file name, its extension picks the format
    import_type : policy selector "1".."5"
    store : CompanyStore the rows are reconciled against

    The selector is checked before the file is touched.
    """
    policy = ImportPolicy.from_selector(import_type)
    return await ImportSession(store, policy).run(content, file_name)
