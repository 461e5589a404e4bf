"""Shared fixtures: every store test runs against both backends."""
from __future__ import annotations

import pytest

from teacher_registry.domain.record import Teacher
from teacher_registry.store import BACKENDS


@pytest.fixture(params=sorted(BACKENDS))
def store(request):
    """An empty store of each backend kind."""
    s = BACKENDS[request.param]()
    yield s
    s.destroy()


@pytest.fixture
def alice() -> Teacher:
    return Teacher.create(1, 30, "Alice")


@pytest.fixture
def bob() -> Teacher:
    return Teacher.create(2, 40, "Bob")
