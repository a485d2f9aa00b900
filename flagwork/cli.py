# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-level wrapper around `Arguments.parse()`.

`run()` turns a parse outcome into console output and a process exit code, so a
program can end with `sys.exit(run(arguments))`:

- HELP / VERSION: text printed, exit code 0
- OK: nothing printed (omitted positionals are reported as a warning), exit code 0
- VALIDATION_FAILED: report printed, exit code 2
- parse error: error printed, exit code 1
"""
from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flagwork.exceptions import ParseError
from flagwork.logger import logger
from flagwork.parser.arguments import Arguments
from flagwork.parser.flags import SwitchFlag
from flagwork.parser.parser_types import ParseStatus

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_VALIDATION_FAILED = 2


def run(arguments: Arguments, argv: Sequence[str] | None = None) -> int:
    """
    Parse `argv` with `arguments`, print what the user asked for and return an exit code.

    Args:
        arguments (Arguments): A configured parser.
        argv (Sequence[str] | None): Tokens to parse. Defaults to `sys.argv[1:]`.

    Returns:
        int: 0 on success, help or version, 2 on validation failure, 1 on a parse error.
    """
    try:
        outcome = arguments.parse(argv)
    except ParseError as error:
        arguments.console.print(f"[failure]error:[/failure] {escape(str(error))}")
        trigger = arguments.get_help_trigger()
        if trigger:
            arguments.console.print(
                f"[hint]Try '{escape(arguments.program)} {escape(trigger)}' "
                "for more information.[/hint]"
            )
        logger.debug("Parse aborted by %r", error.token)
        return EXIT_PARSE_ERROR

    match outcome.status:
        case ParseStatus.HELP:
            arguments.render_help()
        case ParseStatus.VERSION:
            arguments.render_version()
        case ParseStatus.VALIDATION_FAILED:
            arguments.render_report()
            arguments.console.print(
                f"[failure]{outcome.count} validation failure"
                f"{'s' if outcome.count != 1 else ''}[/failure]"
            )
            return EXIT_VALIDATION_FAILED
        case ParseStatus.OK:
            if outcome.omitted:
                arguments.render_report()
    return EXIT_OK


def build_state_table(arguments: Arguments) -> Table:
    """Return a rich `Table` with one row per flag and its current value."""
    table = Table(title=arguments.get_version(), expand=False, box=box.SIMPLE)

    table.add_column("Kind", style="dim")
    table.add_column("Name", style="flag")
    table.add_column("Alias", style="alias")
    table.add_column("Set", justify="center")
    table.add_column("Value", overflow="fold")

    for flag in arguments:
        if isinstance(flag, SwitchFlag):
            value = ""
        else:
            value = ", ".join(flag.get_iterable())
        table.add_row(
            flag.kind.label,
            flag.name,
            f"-{flag.alias}" if flag.alias else "",
            "[success]yes[/success]" if flag.is_set() else "[hint]no[/hint]",
            escape(value),
        )

    numerical = arguments.get_numerical()
    if numerical is not None:
        table.add_row("Numerical", "", "", "[success]yes[/success]", str(numerical))
    return table


def print_state(arguments: Arguments, console: Console | None = None) -> None:
    """Print the state table for the last parse."""
    (console or arguments.console).print(build_state_table(arguments))
