"""Array record store: records in a plain Python list, no link nodes.

The list is kept oldest-first, so the logical head lives at the END of
the list. That makes insert a list.append (amortized O(1)) instead of
an O(n) insert at index 0. Every head-first walk is a reversed scan.

Removal is `del self._records[i]`: the list shifts the tail down and
no predecessor/successor bookkeeping is needed.
"""
from __future__ import annotations

import logging

from teacher_registry.domain.record import Teacher
from teacher_registry.domain.types import TeacherId
from teacher_registry.store.base import RecordStoreBase
from teacher_registry.store.errors import EmptyStoreError, RecordNotFound

log = logging.getLogger(__name__)


class ArrayRecordStore(RecordStoreBase):
    """Store records in a list[Teacher], newest at the end."""

    __slots__ = ("_records", "_closed")

    def __init__(self) -> None:
        self._records: list[Teacher] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def insert(self, record: Teacher) -> None:
        self._check_open()
        self._records.append(record)
        log.debug("Inserted teacher id=%s (count=%d)", record.id, len(self._records))

    def find_by_id(self, teacher_id: TeacherId) -> Teacher | None:
        idx = self._index_of(teacher_id)
        return self._records[idx] if idx is not None else None

    def update_by_id(self, teacher_id: TeacherId, age: int, name: str) -> Teacher:
        idx = self._index_of(teacher_id)
        if idx is None:
            raise RecordNotFound(teacher_id)
        record = self._records[idx]
        record.update(age, name)
        log.debug("Updated teacher id=%s", teacher_id)
        return record

    def delete_by_id(self, teacher_id: TeacherId) -> Teacher:
        self._check_open()
        if not self._records:
            raise EmptyStoreError()
        idx = self._index_of(teacher_id)
        if idx is None:
            raise RecordNotFound(teacher_id)
        record = self._records.pop(idx)
        log.debug("Deleted teacher id=%s (count=%d)", teacher_id, len(self._records))
        return record

    def enumerate(self) -> list[Teacher]:
        self._check_open()
        return self._records[::-1]

    def count(self) -> int:
        self._check_open()
        return len(self._records)

    def destroy(self) -> None:
        if self._closed:
            return
        self._records.clear()
        self._closed = True
        log.debug("Array store destroyed")

    def _index_of(self, teacher_id: TeacherId) -> int | None:
        """List index of the match nearest the logical head, or None."""
        self._check_open()
        for i in range(len(self._records) - 1, -1, -1):
            if self._records[i].id == teacher_id:
                return i
        return None
