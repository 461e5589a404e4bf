"""Command dispatch and the interactive menu loop.

dispatch() runs exactly one command against a store, reading whatever
it needs from an InputProvider. run_menu() is the outer loop: show the
menu, read a choice, dispatch, pause, repeat until EXIT or end of input.

Store signals (RecordNotFound, EmptyStoreError) are caught here and
printed as "Error: ..." lines on the error stream. The loop always
continues after them.
"""
from __future__ import annotations

import logging
import sys
from enum import IntEnum
from typing import TextIO

from teacher_registry.config import MenuConfig
from teacher_registry.console.inputs import InputProvider
from teacher_registry.console.report import format_header, format_listing
from teacher_registry.domain.record import Teacher
from teacher_registry.store.base import RecordStoreBase
from teacher_registry.store.errors import RecordNotFound, RecordStoreError

log = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"


class Command(IntEnum):
    EXIT = 0
    ADD = 1
    EXISTS = 2
    SHOW = 3
    UPDATE = 4
    DELETE = 5
    LIST = 6


TITLES: dict[Command, str] = {
    Command.ADD: "Add to the Teacher's List:",
    Command.EXISTS: "Search Teacher's List for an ID:",
    Command.SHOW: "Read about a specific Teacher:",
    Command.UPDATE: "Update a specific Teacher's info:",
    Command.DELETE: "Remove a specific Teacher from the List:",
    Command.LIST: "Display the Teacher's List:",
}

MENU_TEXT = "\n".join([
    "Menu:",
    "----------------------------",
    "1) Add to the Teacher's List.",
    "2) Search Teacher's List for an ID.",
    "3) Read about a specific Teacher.",
    "4) Update a specific Teacher's info.",
    "5) Remove a specific Teacher from the List.",
    "6) Display the Teacher's List.",
    "0) Exit.",
])


def read_command(inputs: InputProvider) -> Command:
    """Reread until the choice is one of the menu values."""
    while True:
        choice = inputs.read_int(": ")
        if Command.EXIT <= choice <= Command.LIST:
            return Command(choice)


def read_id(inputs: InputProvider) -> int:
    return inputs.read_int("Please Enter Teacher's ID: ")


def add_teachers(store: RecordStoreBase, inputs: InputProvider) -> int:
    """Bulk add: ask for a count, then that many records. Returns how many."""
    n = -1
    while n < 0:
        n = inputs.read_int("Enter how many Teachers you wanna add: ")

    for _ in range(n):
        teacher_id = inputs.read_int("Enter the ID of the teacher: ")
        while not store.is_unique_id(teacher_id):
            teacher_id = inputs.read_int("Enter the ID of the teacher: ")
        name = inputs.read_line("Enter Teacher's Name: ")
        age = inputs.read_int("Enter Teacher's Age: ")
        store.insert(Teacher.create(teacher_id, age, name))
    return n


def dispatch(
    command: Command,
    store: RecordStoreBase,
    inputs: InputProvider,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> bool:
    """Run one command. Returns False only for EXIT."""
    out = out or sys.stdout
    err = err or sys.stderr
    log.debug("Dispatching %s", command.name)

    if command is Command.EXIT:
        return False

    print(format_header(TITLES[command]), file=out)
    try:
        _run(command, store, inputs, out)
    except RecordStoreError as exc:
        log.debug("%s failed: %s", command.name, exc)
        print(f"Error: {exc}", file=err)
    return True


def _run(command: Command, store: RecordStoreBase, inputs: InputProvider, out: TextIO) -> None:
    if command is Command.ADD:
        add_teachers(store, inputs)
    elif command is Command.EXISTS:
        if store.find_by_id(read_id(inputs)) is not None:
            print("The Teacher exist!", file=out)
        else:
            print("The Teacher doesn't exist :(", file=out)
    elif command is Command.SHOW:
        teacher_id = read_id(inputs)
        record = store.find_by_id(teacher_id)
        if record is None:
            raise RecordNotFound(teacher_id)
        print(record.format(), file=out)
    elif command is Command.UPDATE:
        teacher_id = read_id(inputs)
        # Only ask for new details when there is something to update.
        if store.find_by_id(teacher_id) is None:
            raise RecordNotFound(teacher_id)
        name = inputs.read_line("Enter new Teacher Name: ")
        age = inputs.read_int("Enter new Teacher Age: ")
        store.update_by_id(teacher_id, age, name)
    elif command is Command.DELETE:
        store.delete_by_id(read_id(inputs))
    elif command is Command.LIST:
        print(format_listing(store.enumerate(), store.count()), file=out)


def _clear(out: TextIO, config: MenuConfig) -> None:
    if config.clear_screen and out.isatty():
        out.write(CLEAR_SCREEN)
        out.flush()


def run_menu(
    store: RecordStoreBase,
    inputs: InputProvider,
    out: TextIO | None = None,
    err: TextIO | None = None,
    config: MenuConfig | None = None,
) -> int:
    """Interactive loop. Destroys the store on the way out; returns exit code 0."""
    out = out or sys.stdout
    err = err or sys.stderr
    config = config or MenuConfig()

    try:
        while True:
            _clear(out, config)
            print(MENU_TEXT, file=out)
            try:
                command = read_command(inputs)
            except EOFError:
                log.debug("Input closed at menu prompt")
                break
            if command is not Command.EXIT:
                _clear(out, config)
            try:
                if not dispatch(command, store, inputs, out, err):
                    break
                if config.pause:
                    inputs.read_line("Press Enter to continue...")
            except EOFError:
                log.debug("Input closed during %s", command.name)
                break
    finally:
        store.destroy()
    print("Thank you for using my program! <3", file=out)
    return 0
