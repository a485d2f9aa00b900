# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flagwork command-line entry point.

    flagwork [-v] [--log-mode cli|json] DEFINITIONS [-- TOKENS...]

Loads flag definitions from a YAML or TOML file, parses `TOKENS` against them and
prints the resulting state. Useful for trying out a flag layout before wiring it
into a program.
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape

from flagwork.cli import EXIT_OK, EXIT_PARSE_ERROR, print_state, run
from flagwork.config import loader
from flagwork.console import console
from flagwork.exceptions import FlagworkError
from flagwork.parser.arguments import Arguments
from flagwork.parser.parser_types import ParseStatus
from flagwork.utils import setup_logging
from flagwork.version import __version__


def get_root_arguments() -> Arguments:
    arguments = Arguments(
        program="flagwork",
        version=__version__,
        description="Parse TOKENS against the flags declared in a definitions file.",
        epilog="Everything after '--' is handed to the loaded definitions unchanged.",
    )
    arguments.add_switch("verbose", "Log every dispatch step.", alias="v")
    arguments.add_argument(
        "log-mode", "Logging output mode: cli or json.", alias="l"
    )
    arguments.add_argument("log-file", "Also write debug logs to this file.")
    arguments.add_positional("definitions", "YAML or TOML definitions file.")
    arguments.add_positional("tokens", "Tokens to parse.", lowest=0, saturation=0)
    return arguments


def main(argv: Sequence[str] | None = None) -> int:
    root = get_root_arguments()
    code = run(root, argv)
    if code != EXIT_OK or root.last_outcome is None or root.last_outcome.status in (
        ParseStatus.HELP,
        ParseStatus.VERSION,
    ):
        return code

    try:
        setup_logging(
            mode=root.get_value("log-mode"),
            log_filename=root.get_value("log-file"),
            console_log_level=logging.DEBUG if root.is_set("verbose") else logging.WARNING,
        )
    except ValueError as error:
        console.print(f"[failure]error:[/failure] {escape(str(error))}")
        return EXIT_PARSE_ERROR

    definitions = root.get_value("definitions")
    assert definitions is not None
    try:
        arguments = loader(definitions)
    except (OSError, ValidationError, ValueError, TypeError, FlagworkError) as error:
        console.print(f"[failure]error:[/failure] {escape(definitions)}: {escape(str(error))}")
        return EXIT_PARSE_ERROR

    code = run(arguments, root.get_iterable("tokens"))
    if arguments.last_outcome is not None and arguments.last_outcome.status not in (
        ParseStatus.HELP,
        ParseStatus.VERSION,
    ):
        print_state(arguments)
    return code


if __name__ == "__main__":
    sys.exit(main())
