"""teacher-registry CLI entry point.

Usage: teacher-registry [--backend {array,linked}] [--no-clear] [--no-pause]
"""
import argparse
import logging
import sys

from teacher_registry.config import MenuConfig
from teacher_registry.console.inputs import ConsoleInput
from teacher_registry.console.menu import run_menu
from teacher_registry.store import BACKENDS, create_store


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teacher-registry",
        description="In-memory Teacher records behind a console menu.",
    )
    parser.add_argument(
        "--backend", choices=sorted(BACKENDS), default="array",
        help="Record store implementation (default: array)",
    )
    parser.add_argument(
        "--no-clear", action="store_true",
        help="Do not clear the terminal between screens.",
    )
    parser.add_argument(
        "--no-pause", action="store_true",
        help="Do not wait for Enter after each command.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level on stderr (default: WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> MenuConfig:
    return MenuConfig(
        clear_screen=not args.no_clear,
        pause=not args.no_pause,
        backend=args.backend,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)
    store = create_store(config.backend)
    return run_menu(store, ConsoleInput(), config=config)


if __name__ == "__main__":
    sys.exit(main())
