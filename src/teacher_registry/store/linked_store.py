"""Linked record store: a hand-rolled singly-linked list of records.

New records are pushed on the head, so enumeration walks from the most
recent insert to the oldest. Lookup is a linear walk from the head.

Deleting the head node and deleting an interior/tail node are separate
cases: the head case moves `_head`, the interior case relinks the
predecessor to the successor. Both have the same observable effect.

Costs:
  insert:        O(1)
  find/update:   O(n)
  delete:        O(n) scan, O(1) unlink once located
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from teacher_registry.domain.record import Teacher
from teacher_registry.domain.types import TeacherId
from teacher_registry.store.base import RecordStoreBase
from teacher_registry.store.errors import EmptyStoreError, RecordNotFound

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ListNode:
    """One link: the record it owns and the next node (None at the tail)."""
    record: Teacher
    next: ListNode | None = None


class LinkedRecordStore(RecordStoreBase):
    """Records in a singly-linked chain of ListNode objects."""

    __slots__ = ("_head", "_length", "_closed")

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._length = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def insert(self, record: Teacher) -> None:
        self._check_open()
        self._head = ListNode(record, self._head)
        self._length += 1
        log.debug("Inserted teacher id=%s (count=%d)", record.id, self._length)

    def find_by_id(self, teacher_id: TeacherId) -> Teacher | None:
        node = self._find_node(teacher_id)
        return node.record if node is not None else None

    def update_by_id(self, teacher_id: TeacherId, age: int, name: str) -> Teacher:
        node = self._find_node(teacher_id)
        if node is None:
            raise RecordNotFound(teacher_id)
        node.record.update(age, name)
        log.debug("Updated teacher id=%s", teacher_id)
        return node.record

    def delete_by_id(self, teacher_id: TeacherId) -> Teacher:
        self._check_open()
        current = self._head
        if current is None:
            raise EmptyStoreError()

        # Head match: move the head pointer.
        if current.record.id == teacher_id:
            self._head = current.next
            self._length -= 1
            log.debug("Deleted teacher id=%s (count=%d)", teacher_id, self._length)
            return current.record

        # Otherwise stop on the predecessor of the match.
        while current.next is not None and current.next.record.id != teacher_id:
            current = current.next
        if current.next is None:
            raise RecordNotFound(teacher_id)

        victim = current.next
        current.next = victim.next
        victim.next = None
        self._length -= 1
        log.debug("Deleted teacher id=%s (count=%d)", teacher_id, self._length)
        return victim.record

    def enumerate(self) -> list[Teacher]:
        self._check_open()
        result: list[Teacher] = []
        current = self._head
        while current is not None:
            result.append(current.record)
            current = current.next
        return result

    def count(self) -> int:
        self._check_open()
        return self._length

    def destroy(self) -> None:
        if self._closed:
            return
        # Unlink node by node so no chain outlives the store.
        current = self._head
        while current is not None:
            nxt = current.next
            current.next = None
            current = nxt
        self._head = None
        self._length = 0
        self._closed = True
        log.debug("Linked store destroyed")

    def _find_node(self, teacher_id: TeacherId) -> ListNode | None:
        self._check_open()
        current = self._head
        while current is not None:
            if current.record.id == teacher_id:
                return current
            current = current.next
        return None
