"""User input providers consumed by the menu.

The menu never touches sys.stdin directly. It asks an InputProvider for
a line or an integer, which lets tests drive every command from a list
of scripted lines.

Reads are whole lines of any length. End of input raises EOFError; the
menu loop treats that as an exit.
"""
from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable
from typing import TextIO


class InputProvider(ABC):
    """Source of user answers to prompts."""

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Show prompt, return one line without its line terminator."""
        ...

    def read_int(self, prompt: str) -> int:
        """Show prompt until the answer parses as an integer."""
        while True:
            text = self.read_line(prompt).strip()
            try:
                return int(text)
            except ValueError:
                continue


class ConsoleInput(InputProvider):
    """Prompts on a text stream and reads answers from another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def read_line(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")


class ScriptedInput(InputProvider):
    """Replays a fixed list of answers and records every prompt shown."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = deque(lines)
        self.prompts: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError("script exhausted")
        return self._lines.popleft()
