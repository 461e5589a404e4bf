"""Signals raised by record stores.

All of them are recoverable. The console layer catches them and turns
them into messages; nothing in the store aborts the process.
"""
from __future__ import annotations

from teacher_registry.domain.types import TeacherId


class RecordStoreError(Exception):
    """Base class for every store signal."""


class RecordNotFound(RecordStoreError, LookupError):
    """No record with the requested id is in the store."""

    def __init__(self, teacher_id: TeacherId) -> None:
        super().__init__(f"Teacher with id={teacher_id} couldn't be found.")
        self.teacher_id = teacher_id


class EmptyStoreError(RecordStoreError):
    """Delete was attempted on a store holding zero records."""

    def __init__(self) -> None:
        super().__init__("List is Empty. Can't delete from Empty List.")


class DuplicateIdError(RecordStoreError, ValueError):
    """add() was given a record whose id is already taken."""

    def __init__(self, teacher_id: TeacherId) -> None:
        super().__init__(f"Teacher with id={teacher_id} already exists.")
        self.teacher_id = teacher_id


class StoreClosedError(RecordStoreError, RuntimeError):
    """The store was used after destroy()."""

    def __init__(self) -> None:
        super().__init__("Record store has been destroyed.")
