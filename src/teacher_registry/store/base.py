"""Abstract base for record stores.

LinkedRecordStore and ArrayRecordStore both implement this interface,
so the console and the locking wrapper never care which one they hold.

Ordering contract shared by every backend: enumeration is head-first,
the most recently inserted record comes out first. Lookups and deletes
scan from the head, so if a duplicate id ever slips in through
insert(), the newest one wins.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from teacher_registry.domain.record import Teacher
from teacher_registry.domain.types import TeacherId
from teacher_registry.store.errors import DuplicateIdError, StoreClosedError


class RecordStoreBase(ABC):
    """Interface that both linked and array stores implement."""

    @abstractmethod
    def insert(self, record: Teacher) -> None:
        """Prepend a record. Does NOT check id uniqueness."""
        ...

    @abstractmethod
    def find_by_id(self, teacher_id: TeacherId) -> Teacher | None:
        """Return the first record from the head with this id, or None."""
        ...

    @abstractmethod
    def update_by_id(self, teacher_id: TeacherId, age: int, name: str) -> Teacher:
        """Update age/name of the matching record and return it.

        Raises RecordNotFound (store untouched) if the id is absent.
        """
        ...

    @abstractmethod
    def delete_by_id(self, teacher_id: TeacherId) -> Teacher:
        """Remove and return the first matching record from the head.

        Raises EmptyStoreError on an empty store, RecordNotFound when
        the store has records but none with this id.
        """
        ...

    @abstractmethod
    def enumerate(self) -> list[Teacher]:
        """All records, head to tail. Does not mutate the store."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Total number of records."""
        ...

    @abstractmethod
    def destroy(self) -> None:
        """Release every record. The store is unusable afterwards."""
        ...

    @property
    @abstractmethod
    def closed(self) -> bool:
        ...

    def is_unique_id(self, teacher_id: TeacherId) -> bool:
        """True iff no record with this id is stored."""
        return self.find_by_id(teacher_id) is None

    def add(self, record: Teacher) -> None:
        """insert() with the uniqueness check folded in.

        Raises DuplicateIdError and leaves the store unchanged if the id
        is already taken.
        """
        if not self.is_unique_id(record.id):
            raise DuplicateIdError(record.id)
        self.insert(record)

    def _check_open(self) -> None:
        if self.closed:
            raise StoreClosedError()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Teacher]:
        return iter(self.enumerate())

    def __enter__(self) -> RecordStoreBase:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()
