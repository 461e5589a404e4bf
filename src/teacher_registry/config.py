"""Runtime settings for the console menu.

Built from CLI flags in cli.py. There are no environment variables and
no config files: every run starts from these defaults.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MenuConfig:
    clear_screen: bool = True   # ANSI clear before each screen (terminals only)
    pause: bool = True          # "Press Enter to continue..." after each command
    backend: str = "array"      # store backend name, see store.BACKENDS
