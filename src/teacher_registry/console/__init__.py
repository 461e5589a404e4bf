"""Console front end: input providers, rendering, and the menu loop."""
from teacher_registry.console.inputs import ConsoleInput, InputProvider, ScriptedInput
from teacher_registry.console.menu import (
    Command,
    add_teachers,
    dispatch,
    read_command,
    run_menu,
)
from teacher_registry.console.report import format_header, format_listing

__all__ = [
    "Command",
    "ConsoleInput",
    "InputProvider",
    "ScriptedInput",
    "add_teachers",
    "dispatch",
    "format_header",
    "format_listing",
    "read_command",
    "run_menu",
]
