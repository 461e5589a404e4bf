"""Contract tests run against every RecordStoreBase backend.

Covers: insert/find, head-first order, uniqueness check, update,
delete (head, interior, tail), empty vs not-found signals, the count
invariant, duplicate-id tie-breaks, add(), and destroy().
"""
from __future__ import annotations

import random

import pytest

from teacher_registry.domain.record import Teacher
from teacher_registry.store import (
    ArrayRecordStore,
    LinkedRecordStore,
    create_store,
)
from teacher_registry.store.errors import (
    DuplicateIdError,
    EmptyStoreError,
    RecordNotFound,
    StoreClosedError,
)


def _ids(store):
    return [t.id for t in store.enumerate()]


# ── create + insert ──

def test_new_store_is_empty(store):
    assert store.count() == 0
    assert len(store) == 0
    assert store.enumerate() == []


def test_insert_then_find(store, alice):
    store.insert(alice)
    found = store.find_by_id(1)
    assert found is alice
    assert (found.age, found.name) == (30, "Alice")
    assert store.count() == 1


def test_find_missing_returns_none(store, alice):
    assert store.find_by_id(1) is None
    store.insert(alice)
    assert store.find_by_id(99) is None


def test_enumeration_is_head_first(store):
    for i in range(1, 6):
        store.insert(Teacher.create(i, 20 + i, f"t{i}"))
    assert _ids(store) == [5, 4, 3, 2, 1]
    assert [t.id for t in store] == [5, 4, 3, 2, 1]


def test_enumerate_does_not_mutate(store, alice, bob):
    store.insert(alice)
    store.insert(bob)
    listing = store.enumerate()
    listing.clear()
    assert _ids(store) == [2, 1]
    assert store.count() == 2


# ── uniqueness ──

def test_is_unique_id(store, alice):
    assert store.is_unique_id(1) is True
    store.insert(alice)
    assert store.is_unique_id(1) is False
    assert store.is_unique_id(2) is True


def test_checked_inserts_keep_ids_distinct(store):
    rng = random.Random(42)
    for _ in range(200):
        candidate = rng.randint(0, 50)
        if store.is_unique_id(candidate):
            store.insert(Teacher.create(candidate, 30, "x"))
    ids = _ids(store)
    assert len(ids) == len(set(ids))


def test_insert_does_not_check_uniqueness(store):
    store.insert(Teacher.create(1, 30, "first"))
    store.insert(Teacher.create(1, 31, "second"))
    assert store.count() == 2
    # Nearest the head wins.
    assert store.find_by_id(1).name == "second"


def test_add_rejects_duplicate(store, alice):
    store.add(alice)
    with pytest.raises(DuplicateIdError, match="id=1"):
        store.add(Teacher.create(1, 99, "Imposter"))
    assert store.count() == 1
    assert store.find_by_id(1).name == "Alice"


def test_duplicate_id_error_is_value_error(store, alice):
    store.add(alice)
    with pytest.raises(ValueError):
        store.add(Teacher.create(1, 30, "Alice"))


# ── update ──

def test_update_preserves_id(store, alice):
    store.insert(alice)
    updated = store.update_by_id(1, 31, "Alicia")
    assert updated.id == 1
    found = store.find_by_id(1)
    assert (found.id, found.age, found.name) == (1, 31, "Alicia")


def test_update_missing_leaves_store_unchanged(store, alice, bob):
    store.insert(alice)
    store.insert(bob)
    with pytest.raises(RecordNotFound) as excinfo:
        store.update_by_id(3, 99, "Nobody")
    assert excinfo.value.teacher_id == 3
    assert [(t.id, t.age, t.name) for t in store] == [(2, 40, "Bob"), (1, 30, "Alice")]


def test_update_on_empty_store_is_not_found(store):
    with pytest.raises(RecordNotFound):
        store.update_by_id(1, 1, "x")


# ── delete ──

def test_delete_on_empty_store(store):
    with pytest.raises(EmptyStoreError):
        store.delete_by_id(1)
    assert store.count() == 0


def test_delete_then_find(store, alice, bob):
    store.insert(alice)
    store.insert(bob)
    removed = store.delete_by_id(1)
    assert removed is alice
    assert store.find_by_id(1) is None
    assert store.count() == 1


def test_delete_head_interior_tail(store):
    for i in range(1, 6):
        store.insert(Teacher.create(i, 30, f"t{i}"))
    store.delete_by_id(5)   # head
    assert _ids(store) == [4, 3, 2, 1]
    store.delete_by_id(3)   # interior
    assert _ids(store) == [4, 2, 1]
    store.delete_by_id(1)   # tail
    assert _ids(store) == [4, 2]
    assert store.count() == 2


def test_delete_missing_on_nonempty(store, alice):
    store.insert(alice)
    with pytest.raises(RecordNotFound, match="id=7 couldn't be found"):
        store.delete_by_id(7)
    assert store.count() == 1


def test_not_found_is_lookup_error(store, alice):
    store.insert(alice)
    with pytest.raises(LookupError):
        store.delete_by_id(2)


def test_delete_removes_only_first_duplicate(store):
    store.insert(Teacher.create(1, 30, "older"))
    store.insert(Teacher.create(2, 30, "middle"))
    store.insert(Teacher.create(1, 30, "newer"))
    removed = store.delete_by_id(1)
    assert removed.name == "newer"
    assert [t.name for t in store] == ["middle", "older"]


def test_documented_example(store, alice, bob):
    store.insert(alice)
    store.insert(bob)
    assert [t.name for t in store.enumerate()] == ["Bob", "Alice"]
    store.delete_by_id(1)
    assert [t.name for t in store.enumerate()] == ["Bob"]
    with pytest.raises(RecordNotFound):
        store.delete_by_id(1)
    store.delete_by_id(2)
    assert store.count() == 0
    with pytest.raises(EmptyStoreError):
        store.delete_by_id(2)


def test_count_matches_enumeration_under_random_ops(store):
    rng = random.Random(7)
    for _ in range(500):
        tid = rng.randint(0, 30)
        if rng.random() < 0.6:
            if store.is_unique_id(tid):
                store.insert(Teacher.create(tid, 40, "x"))
        else:
            try:
                store.delete_by_id(tid)
            except (RecordNotFound, EmptyStoreError):
                pass
        assert store.count() == len(store.enumerate())


# ── destroy ──

def test_destroy_closes_store(store, alice):
    store.insert(alice)
    store.destroy()
    assert store.closed is True
    with pytest.raises(StoreClosedError):
        store.count()
    with pytest.raises(StoreClosedError):
        store.find_by_id(1)
    with pytest.raises(StoreClosedError):
        store.insert(Teacher.create(2, 1, "x"))
    # Second destroy is a no-op.
    store.destroy()


def test_context_manager_destroys(store, alice):
    with store as s:
        s.insert(alice)
        assert s.count() == 1
    assert store.closed is True


# ── backends agree ──

def test_backends_are_observably_identical():
    rng = random.Random(3)
    linked, array = LinkedRecordStore(), ArrayRecordStore()
    for step in range(300):
        tid = rng.randint(0, 20)
        op = rng.choice(["insert", "update", "delete"])
        outcomes = []
        for s in (linked, array):
            try:
                if op == "insert":
                    s.insert(Teacher.create(tid, step, f"n{step}"))
                    outcomes.append("ok")
                elif op == "update":
                    outcomes.append(s.update_by_id(tid, step, f"u{step}").name)
                else:
                    outcomes.append(s.delete_by_id(tid).name)
            except (RecordNotFound, EmptyStoreError) as exc:
                outcomes.append(type(exc).__name__)
        assert outcomes[0] == outcomes[1]
        assert linked.enumerate() == array.enumerate()


def test_create_store_by_name():
    assert isinstance(create_store("array"), ArrayRecordStore)
    assert isinstance(create_store("linked"), LinkedRecordStore)
    with pytest.raises(ValueError, match="Unknown store backend"):
        create_store("btree")


def test_package_exports_only_store_api():
    import teacher_registry.store as store_pkg
    assert "ListNode" not in store_pkg.__all__
    assert not hasattr(store_pkg, "ListNode")
