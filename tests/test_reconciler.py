import pytest

from import_engine.errors import InvalidPolicySelector
from import_engine.policy import ImportPolicy
from import_engine.reconciler import ActionKind, fill_missing, overwrite, reconcile
from import_engine.records import CompanyRecord

P = ImportPolicy

EXISTING = CompanyRecord(email="a@x.com", name="Acme", industry="", location="Berlin")
INCOMING = CompanyRecord(email="a@x.com", name="Acme Corp", industry="Tech", phone=5551234)


@pytest.mark.parametrize("selector, policy", [
    ("1", P.CREATE_ONLY),
    ("2", P.CREATE_OR_FILL_MISSING),
    ("3", P.CREATE_OR_OVERWRITE),
    ("4", P.UPDATE_ONLY_FILL_MISSING),
    ("5", P.UPDATE_ONLY_OVERWRITE),
])
def test_selector_mapping(selector, policy):
    assert ImportPolicy.from_selector(selector) is policy


@pytest.mark.parametrize("selector", ["0", "6", "9", "", " 1", None, 1, "one"])
def test_bad_selector(selector):
    with pytest.raises(InvalidPolicySelector):
        ImportPolicy.from_selector(selector)


# ── No existing record ─────────────────────────────────────────────────

@pytest.mark.parametrize("policy, kind", [
    (P.CREATE_ONLY, ActionKind.CREATE),
    (P.CREATE_OR_FILL_MISSING, ActionKind.CREATE),
    (P.CREATE_OR_OVERWRITE, ActionKind.CREATE),
    (P.UPDATE_ONLY_FILL_MISSING, ActionKind.SKIP),
    (P.UPDATE_ONLY_OVERWRITE, ActionKind.SKIP),
])
def test_absent_record(policy, kind):
    action = reconcile(policy, INCOMING, None)
    assert action.kind is kind
    if kind is ActionKind.CREATE:
        assert action.record == INCOMING


# ── Existing record ────────────────────────────────────────────────────

def test_create_only_never_touches_existing():
    assert reconcile(P.CREATE_ONLY, INCOMING, EXISTING).kind is ActionKind.SKIP


@pytest.mark.parametrize("policy", [P.CREATE_OR_FILL_MISSING, P.UPDATE_ONLY_FILL_MISSING])
def test_fill_missing_only_fills_empty_fields(policy):
    action = reconcile(policy, INCOMING, EXISTING)
    assert action.kind is ActionKind.UPDATE
    assert action.record == CompanyRecord(
        email="a@x.com", name="Acme", industry="Tech", location="Berlin", phone=5551234,
    )


@pytest.mark.parametrize("policy", [P.CREATE_OR_FILL_MISSING, P.UPDATE_ONLY_FILL_MISSING])
def test_fill_missing_without_change_skips(policy):
    full = CompanyRecord(email="a@x.com", name="Acme", industry="Retail",
                         location="Berlin", phone=1)
    assert reconcile(policy, INCOMING, full).kind is ActionKind.SKIP


@pytest.mark.parametrize("policy", [P.CREATE_OR_OVERWRITE, P.UPDATE_ONLY_OVERWRITE])
def test_overwrite_replaces_provided_fields(policy):
    action = reconcile(policy, INCOMING, EXISTING)
    assert action.kind is ActionKind.UPDATE
    assert action.record == CompanyRecord(
        email="a@x.com", name="Acme Corp", industry="Tech", location="Berlin", phone=5551234,
    )


@pytest.mark.parametrize("policy", [P.CREATE_OR_OVERWRITE, P.UPDATE_ONLY_OVERWRITE])
def test_overwrite_always_updates(policy):
    action = reconcile(policy, EXISTING, EXISTING)
    assert action.kind is ActionKind.UPDATE
    assert action.record == EXISTING


def test_overwrite_never_erases_with_absent_values():
    sparse = CompanyRecord(email="a@x.com", name="New Name")
    merged = overwrite(EXISTING, sparse)
    assert merged.location == "Berlin"
    assert merged.name == "New Name"


def test_fill_missing_ignores_absent_incoming():
    sparse = CompanyRecord(email="a@x.com", name="Acme")
    assert fill_missing(EXISTING, sparse) is None


def test_merge_does_not_mutate_inputs():
    before = EXISTING
    overwrite(EXISTING, INCOMING)
    fill_missing(EXISTING, INCOMING)
    assert EXISTING is before
    assert EXISTING.name == "Acme"
