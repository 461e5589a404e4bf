"""Thread-safe access to record stores."""
from teacher_registry.concurrency.locked_store import LockedRecordStore

__all__ = ["LockedRecordStore"]
