"""Teacher record: the single entity type held by the stores.

The id is caller-assigned and fixed at creation. Age and name are
replaced together through update(). Python strings are immutable, so
the stored name can never alias a buffer the caller keeps mutating.
"""
from __future__ import annotations

from teacher_registry.domain.types import TeacherId


class Teacher:
    """A single Teacher entry: id, age, name.

    `id` is a read-only property. Everything else is plain mutable state
    owned by whichever store holds the record.
    """

    __slots__ = ("_id", "age", "name")

    def __init__(self, id: TeacherId, age: int, name: str) -> None:
        self._id = id
        self.age = age
        self.name = name

    @classmethod
    def create(cls, id: TeacherId, age: int, name: str) -> Teacher:
        """Factory: build a record. Never fails."""
        return cls(id, age, str(name))

    @property
    def id(self) -> TeacherId:
        return self._id

    def update(self, age: int, name: str) -> None:
        """Replace age and name in place. The id is untouched."""
        self.age = age
        self.name = str(name)

    def format(self) -> str:
        return f"<Teacher>(id: {self._id}, name: '{self.name}', age: {self.age})"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Teacher(id={self._id!r}, age={self.age!r}, name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Teacher):
            return NotImplemented
        return (self._id, self.age, self.name) == (other._id, other.age, other.name)

    # Mutable records are not hashable.
    __hash__ = None  # type: ignore[assignment]
