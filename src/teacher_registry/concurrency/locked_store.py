"""Coarse-grained lock wrapper around any record store.

Neither backend is safe for concurrent mutation and lookup: a reader
walking the linked chain can observe a half-relinked predecessor, and
the array scan can skip or repeat a slot while another thread pops.
One threading.Lock around every operation fixes that. It serializes
all callers, which is fine for a store whose operations never block.
"""
from __future__ import annotations

import threading

from teacher_registry.domain.record import Teacher
from teacher_registry.domain.types import TeacherId
from teacher_registry.store.array_store import ArrayRecordStore
from teacher_registry.store.base import RecordStoreBase


class LockedRecordStore(RecordStoreBase):
    """A RecordStoreBase wrapped in a single coarse lock.

    add() holds the lock across its uniqueness check and its insert, so
    two threads adding the same id cannot both succeed.
    """

    def __init__(self, store: RecordStoreBase | None = None) -> None:
        self._store = store if store is not None else ArrayRecordStore()
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._store.closed

    def insert(self, record: Teacher) -> None:
        with self._lock:
            self._store.insert(record)

    def add(self, record: Teacher) -> None:
        with self._lock:
            self._store.add(record)

    def find_by_id(self, teacher_id: TeacherId) -> Teacher | None:
        with self._lock:
            return self._store.find_by_id(teacher_id)

    def is_unique_id(self, teacher_id: TeacherId) -> bool:
        with self._lock:
            return self._store.is_unique_id(teacher_id)

    def update_by_id(self, teacher_id: TeacherId, age: int, name: str) -> Teacher:
        with self._lock:
            return self._store.update_by_id(teacher_id, age, name)

    def delete_by_id(self, teacher_id: TeacherId) -> Teacher:
        with self._lock:
            return self._store.delete_by_id(teacher_id)

    def enumerate(self) -> list[Teacher]:
        with self._lock:
            return self._store.enumerate()

    def count(self) -> int:
        with self._lock:
            return self._store.count()

    def destroy(self) -> None:
        with self._lock:
            self._store.destroy()

    @property
    def store(self) -> RecordStoreBase:
        return self._store
