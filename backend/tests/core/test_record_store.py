"""Record Store — tests for identity invariants of the in-memory store.

Tests cover:
    - add assigns a unique id when omitted and keeps a caller-supplied id
    - add rejects duplicate ids without overwriting
    - get_all returns every record, or exact department matches only
    - update merges shallowly and never changes the id
    - update/delete on a missing id return NOT_FOUND and change nothing
    - delete removes and returns the stored record
"""

from employee_registry.core.outcome import Failure, FailureKind, Success
from employee_registry.core.record_store import RecordStore


def _seeded_store() -> RecordStore:
    """Helper: store with three employees across two departments."""
    store = RecordStore()
    store.add({"id": "1", "name": "Ann", "department": "Sales"})
    store.add({"id": "2", "name": "Bob", "department": "HR"})
    store.add({"id": "3", "name": "Cid", "department": "Sales"})
    return store


def _ids(records: list[dict]) -> set[str]:
    return {r["id"] for r in records}


# ─── add ─────────────────────────────────────────────────────────

def test_add_without_id_assigns_non_empty_id():
    store = RecordStore()
    outcome = store.add({"name": "Ann", "department": "Sales"})
    assert isinstance(outcome, Success)
    assert outcome.value["id"]
    assert outcome.value["id"] in store


def test_add_with_none_id_assigns_one():
    store = RecordStore()
    outcome = store.add({"id": None, "name": "Ann"})
    assert isinstance(outcome.value["id"], str)
    assert outcome.value["id"]


def test_add_generates_distinct_ids():
    store = RecordStore()
    ids = {store.add({"name": f"e{i}"}).value["id"] for i in range(50)}
    assert len(ids) == 50
    assert len(store) == 50


def test_add_keeps_caller_supplied_id():
    store = RecordStore()
    outcome = store.add({"id": "abc", "department": "Ops"})
    assert outcome.value == {"id": "abc", "department": "Ops"}


def test_add_duplicate_id_fails_with_already_exists():
    store = RecordStore()
    store.add({"id": "1", "name": "Ann"})
    outcome = store.add({"id": "1", "name": "Impostor"})
    assert isinstance(outcome, Failure)
    assert outcome.kind == FailureKind.ALREADY_EXISTS
    assert outcome.identifier == "1"
    assert "1" in outcome.message


def test_add_duplicate_leaves_original_untouched():
    store = RecordStore()
    store.add({"id": "1", "name": "Ann"})
    store.add({"id": "1", "name": "Impostor"})
    assert store.get("1").value == {"id": "1", "name": "Ann"}
    assert len(store) == 1


def test_add_does_not_mutate_caller_record():
    store = RecordStore()
    candidate = {"name": "Ann"}
    store.add(candidate)
    assert "id" not in candidate


def test_returned_record_is_a_copy():
    store = RecordStore()
    created = store.add({"id": "1", "name": "Ann"}).value
    created["name"] = "Changed"
    assert store.get("1").value["name"] == "Ann"


# ─── get_all ─────────────────────────────────────────────────────

def test_get_all_on_empty_store_returns_empty_list():
    assert RecordStore().get_all().value == []


def test_get_all_without_filter_returns_everything():
    store = _seeded_store()
    assert _ids(store.get_all().value) == {"1", "2", "3"}


def test_get_all_lists_in_insertion_order():
    store = _seeded_store()
    assert [r["id"] for r in store.get_all().value] == ["1", "2", "3"]


def test_get_all_filters_by_exact_department():
    store = _seeded_store()
    assert _ids(store.get_all("Sales").value) == {"1", "3"}
    assert _ids(store.get_all("HR").value) == {"2"}


def test_get_all_filter_is_case_sensitive_and_not_partial():
    store = _seeded_store()
    assert store.get_all("sales").value == []
    assert store.get_all("Sal").value == []


def test_get_all_filter_skips_records_without_department():
    store = _seeded_store()
    store.add({"id": "4", "name": "Dee"})
    assert "4" not in _ids(store.get_all("Sales").value)
    assert "4" in _ids(store.get_all().value)


def test_get_all_is_idempotent_without_mutation():
    store = _seeded_store()
    first = store.get_all().value
    second = store.get_all().value
    assert first == second


# ─── update ──────────────────────────────────────────────────────

def test_update_preserves_unspecified_fields():
    store = RecordStore()
    store.add({"id": "1", "name": "Ann", "department": "Sales"})
    outcome = store.update("1", {"department": "HR"})
    assert outcome.value == {"id": "1", "name": "Ann", "department": "HR"}
    assert store.get("1").value == outcome.value


def test_update_adds_new_attributes():
    store = RecordStore()
    store.add({"id": "1", "name": "Ann"})
    assert store.update("1", {"title": "Lead"}).value["title"] == "Lead"


def test_update_ignores_id_change():
    store = RecordStore()
    store.add({"id": "1", "name": "Ann"})
    outcome = store.update("1", {"id": "2", "name": "Anna"})
    assert outcome.value == {"id": "1", "name": "Anna"}
    assert "2" not in store


def test_update_missing_id_fails_with_not_found():
    store = _seeded_store()
    before = store.get_all().value
    outcome = store.update("missing", {"department": "HR"})
    assert isinstance(outcome, Failure)
    assert outcome.kind == FailureKind.NOT_FOUND
    assert outcome.identifier == "missing"
    assert store.get_all().value == before


# ─── delete ──────────────────────────────────────────────────────

def test_delete_returns_pre_deletion_record():
    store = _seeded_store()
    before = store.get("2").value
    outcome = store.delete("2")
    assert outcome.value == before


def test_delete_removes_from_listing():
    store = _seeded_store()
    store.delete("2")
    assert _ids(store.get_all().value) == {"1", "3"}
    assert "2" not in store


def test_delete_missing_id_fails_and_leaves_store_unchanged():
    store = _seeded_store()
    outcome = store.delete("missing")
    assert outcome.kind == FailureKind.NOT_FOUND
    assert len(store) == 3


def test_delete_twice_fails_second_time():
    store = _seeded_store()
    assert store.delete("1").ok
    assert store.delete("1").kind == FailureKind.NOT_FOUND


def test_deleted_id_can_be_reused():
    store = _seeded_store()
    store.delete("1")
    assert store.add({"id": "1", "name": "New"}).ok


# ─── get ─────────────────────────────────────────────────────────

def test_get_missing_id_fails_with_not_found():
    assert RecordStore().get("x").kind == FailureKind.NOT_FOUND
