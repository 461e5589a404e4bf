"""Domain model for teacher-registry.

Re-exports the public types:
    from teacher_registry.domain import Teacher, TeacherId
"""
from teacher_registry.domain.record import Teacher
from teacher_registry.domain.types import TeacherId

__all__ = [
    "Teacher",
    "TeacherId",
]
