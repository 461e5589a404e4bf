"""Record store implementations: linked (node chain) and array (list-backed).

Both keep head-first order and the same error signals. The linked store
is the direct chain-of-nodes structure; the array store drops the link
bookkeeping and is the default the CLI uses.
"""
from teacher_registry.store.array_store import ArrayRecordStore
from teacher_registry.store.base import RecordStoreBase
from teacher_registry.store.errors import (
    DuplicateIdError,
    EmptyStoreError,
    RecordNotFound,
    RecordStoreError,
    StoreClosedError,
)
from teacher_registry.store.linked_store import LinkedRecordStore

BACKENDS: dict[str, type[RecordStoreBase]] = {
    "array": ArrayRecordStore,
    "linked": LinkedRecordStore,
}


def create_store(backend: str = "array") -> RecordStoreBase:
    """Build an empty store for a backend name ("array" or "linked")."""
    try:
        return BACKENDS[backend]()
    except KeyError:
        raise ValueError(
            f"Unknown store backend {backend!r}; expected one of {sorted(BACKENDS)}"
        ) from None


__all__ = [
    "ArrayRecordStore",
    "BACKENDS",
    "DuplicateIdError",
    "EmptyStoreError",
    "LinkedRecordStore",
    "RecordNotFound",
    "RecordStoreBase",
    "RecordStoreError",
    "StoreClosedError",
    "create_store",
]
