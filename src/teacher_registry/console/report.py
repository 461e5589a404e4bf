"""Text rendering of records and store listings for the console."""
from __future__ import annotations

from collections.abc import Sequence

from teacher_registry.domain.record import Teacher


def format_listing(records: Sequence[Teacher], count: int) -> str:
    """Bracketed listing, one record per line, then the count.

    [
    <Teacher>(id: 2, name: 'Bob', age: 40),
    <Teacher>(id: 1, name: 'Alice', age: 30),
    ], length: 2
    """
    lines = ["["]
    lines.extend(f"{record.format()}," for record in records)
    lines.append(f"], length: {count}")
    return "\n".join(lines)


def format_header(title: str) -> str:
    """Title underlined with dashes, two wider than the title."""
    return f"{title}\n{'-' * (len(title) + 2)}"
