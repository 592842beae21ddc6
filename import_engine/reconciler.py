"""
import_engine.reconciler - Decide what one validated row does to the store.

Everything here is pure: the caller looks the existing record up, passes
it in, and executes the returned Action.  No store access happens here.

    policy                    | no existing | existing
    --------------------------+-------------+----------------------------
    CREATE_ONLY               | create      | skip
    CREATE_OR_FILL_MISSING    | create      | fill missing, skip if no-op
    CREATE_OR_OVERWRITE       | create      | overwrite, always update
    UPDATE_ONLY_FILL_MISSING  | skip        | fill missing, skip if no-op
    UPDATE_ONLY_OVERWRITE     | skip        | overwrite, always update
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional

from import_engine.field_map import MERGE_FIELDS
from import_engine.policy import ImportPolicy
from import_engine.records import CompanyRecord


class ActionKind(enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    SKIP = "skip"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    record: Optional[CompanyRecord] = None


SKIP = Action(ActionKind.SKIP)


def _is_empty(value) -> bool:
    return value is None or value == ""


def fill_missing(
    existing: CompanyRecord, incoming: CompanyRecord
) -> Optional[CompanyRecord]:
    """
    Copy incoming values into fields the existing record leaves empty.

    Returns the merged record, or None when no field changed.
    """
    changes = {}
    for field in MERGE_FIELDS:
        new = getattr(incoming, field)
        if new is not None and _is_empty(getattr(existing, field)):
            changes[field] = new
    if not changes:
        return None
    return replace(existing, **changes)


def overwrite(existing: CompanyRecord, incoming: CompanyRecord) -> CompanyRecord:
    """Replace every field the incoming row provides; absent values keep the old data."""
    changes = {
        field: getattr(incoming, field)
        for field in MERGE_FIELDS
        if getattr(incoming, field) is not None
    }
    return replace(existing, **changes)


def merge(
    existing: CompanyRecord, incoming: CompanyRecord, policy: ImportPolicy
) -> Optional[CompanyRecord]:
    """New state for an existing record under *policy*, None to leave it alone."""
    if not policy.updates_existing:
        return None
    if policy.overwrites:
        return overwrite(existing, incoming)
    return fill_missing(existing, incoming)


def reconcile(
    policy: ImportPolicy,
    incoming: CompanyRecord,
    existing: Optional[CompanyRecord],
) -> Action:
    if existing is None:
        if policy.creates_new:
            return Action(ActionKind.CREATE, incoming)
        return SKIP

    merged = merge(existing, incoming, policy)
    if merged is None:
        return SKIP
    return Action(ActionKind.UPDATE, merged)
