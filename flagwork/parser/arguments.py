# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Arguments`, the public face of the Flagwork argument engine.

An `Arguments` instance is configured once with switches, regular flags,
multi-valued flags and positional flags, then parses exactly one flat token
stream and answers queries about the result.

Key Features:
- Four flag kinds with per-kind value rules (see `flagwork.parser.flags`)
- Single-character aliases and grouped short flags (`-vxf`)
- `--name=value` and `-n=value` assignment
- Regular flags that append with a separator instead of replacing
- Multi/positional arity bounds (`lowest`, `saturation`)
- Help and version short-circuit (`--help`, `-h`, `--version`, `-V`)
- A single numerical argument slot for idioms like `-42`
- Aggregated validation with a printable report
- Rich-powered help rendering grouped by flag kind
- Diagnostics delivered to an injectable sink and to the `flagwork` logger

Public Interface:
- `add_switch`, `add_argument`, `add_obligatory`, `add_multi`, `add_positional`
- `parse(args)` → `ParseOutcome`
- `is_set`, `get_value`, `get_iterable`, `get_positional`, `get_numerical`
- `get_help`, `render_help`, `get_version`, `get_report`, `render_report`

Example Usage:
    arguments = Arguments(program="convert", version="1.2.0")
    arguments.add_switch("verbose", "Print progress", alias="v")
    arguments.add_argument("output", "Output file", alias="o")
    arguments.add_positional("input", "Input file")

    outcome = arguments.parse(["-v", "-o", "out.txt", "in.txt"])
    # outcome.status == ParseStatus.OK
    # arguments.get_value("output") == "out.txt"

Notes:
    Parsing the same instance twice without `reset()` accumulates into
    append-enabled regular flags and into multi/positional flags. This supports
    batch re-parsing, but is surprising if you expect a fresh state: call
    `reset()` between unrelated parses.
"""
from __future__ import annotations

import logging
import sys
from typing import Iterator, Sequence

from rich.console import Console
from rich.markup import escape

from flagwork.console import console
from flagwork.exceptions import ConfigurationError, ParseError
from flagwork.logger import logger
from flagwork.parser.dispatcher import Dispatcher, DispatchState, Triggers
from flagwork.parser.flag_kind import FlagKind
from flagwork.parser.flags import (
    Flag,
    MultiFlag,
    PositionalFlag,
    RegularFlag,
    SwitchFlag,
)
from flagwork.parser.parser_types import (
    Diagnostic,
    DiagnosticSink,
    ParseOutcome,
    ParseStatus,
)
from flagwork.parser.registry import FlagRegistry
from flagwork.parser.validator import FAILURE_TITLES, render_report, validate
from flagwork.signals import HelpSignal, VersionSignal
from flagwork.utils import get_program_invocation

HELP_COLUMN = 30


class Arguments:
    """
    Flag registry, token dispatcher and query API for one command line.

    Args:
        program (str | None): Program name used in usage and version text.
            Defaults to the name the current process was invoked with.
        version (str | None): Version string. When given, the version trigger
            (`--version` / `-V`) is enabled.
        description (str): Shown under the usage line in help output.
        epilog (str): Shown at the end of help output.
        help_keyword (str | None): Long help trigger, `None` to disable.
        help_alias (str | None): Short help trigger, `None` to disable.
        version_keyword (str | None): Long version trigger.
        version_alias (str | None): Short version trigger.
        sink (DiagnosticSink | None): Called with every `Diagnostic` the
            dispatcher emits.
    """

    def __init__(
        self,
        program: str | None = None,
        version: str | None = None,
        description: str = "",
        epilog: str = "",
        help_keyword: str | None = "help",
        help_alias: str | None = "h",
        version_keyword: str | None = "version",
        version_alias: str | None = "V",
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.console: Console = console
        self.program: str = program or get_program_invocation()
        self.version: str | None = None
        self.description: str = description
        self.epilog: str = epilog
        self.sink: DiagnosticSink | None = sink
        self.registry = FlagRegistry()
        self.triggers = Triggers()
        self.diagnostics: list[Diagnostic] = []
        self.last_outcome: ParseOutcome | None = None
        self._dispatcher = Dispatcher(self.registry, self.triggers, self._emit)
        self.set_help(help_keyword, help_alias)
        if version is not None:
            self.set_version(version, version_keyword, version_alias)

    # Configuration

    def register(
        self,
        kind: FlagKind | str,
        name: str,
        help: str = "",
        alias: str | None = None,
        default: str | None = None,
        obligatory: bool = False,
        append_sep: str | None = None,
        lowest: int = 0,
        saturation: int = 0,
    ) -> Flag:
        """Register a flag of any kind. See `FlagRegistry.register`."""
        return self.registry.register(
            kind,
            name,
            help=help,
            alias=alias,
            default=default,
            obligatory=obligatory,
            append_sep=append_sep,
            lowest=lowest,
            saturation=saturation,
        )

    def add_switch(self, name: str, help: str = "", alias: str | None = None) -> SwitchFlag:
        """Add a presence-only flag."""
        flag = self.register(FlagKind.SWITCH, name, help, alias=alias)
        assert isinstance(flag, SwitchFlag)
        return flag

    def add_argument(
        self,
        name: str,
        help: str = "",
        alias: str | None = None,
        default: str | None = None,
        append_sep: str | None = None,
    ) -> RegularFlag:
        """Add an optional single-valued flag."""
        flag = self.register(
            FlagKind.REGULAR,
            name,
            help,
            alias=alias,
            default=default,
            append_sep=append_sep,
        )
        assert isinstance(flag, RegularFlag)
        return flag

    def add_obligatory(
        self,
        name: str,
        help: str = "",
        alias: str | None = None,
        append_sep: str | None = None,
    ) -> RegularFlag:
        """Add a single-valued flag that must be supplied."""
        flag = self.register(
            FlagKind.REGULAR,
            name,
            help,
            alias=alias,
            obligatory=True,
            append_sep=append_sep,
        )
        assert isinstance(flag, RegularFlag)
        return flag

    def add_multi(
        self,
        name: str,
        help: str = "",
        alias: str | None = None,
        lowest: int = 0,
        saturation: int = 0,
    ) -> MultiFlag:
        """Add a flag that collects one value per occurrence."""
        flag = self.register(
            FlagKind.MULTI, name, help, alias=alias, lowest=lowest, saturation=saturation
        )
        assert isinstance(flag, MultiFlag)
        return flag

    def add_positional(
        self,
        name: str,
        help: str = "",
        lowest: int = 1,
        saturation: int | None = None,
    ) -> PositionalFlag:
        """
        Add a positional flag.

        Positional flags are filled from unmatched tokens in declaration order.
        `saturation` defaults to `lowest`, so `add_positional("input")` takes
        exactly one value.
        """
        if saturation is None:
            saturation = lowest
        flag = self.register(
            FlagKind.POSITIONAL, name, help, lowest=lowest, saturation=saturation
        )
        assert isinstance(flag, PositionalFlag)
        return flag

    def _get_bounded(self, name: str, method: str) -> MultiFlag:
        flag = self.registry.lookup(name)
        if not isinstance(flag, MultiFlag):
            raise ConfigurationError(
                f"{flag.name}[{flag.kind}] flag doesn't support {method}"
            )
        return flag

    def set_lowest(self, name: str, lowest: int) -> None:
        self._get_bounded(name, "set_lowest").set_lowest(lowest)

    def set_saturation(self, name: str, saturation: int) -> None:
        self._get_bounded(name, "set_saturation").set_saturation(saturation)

    def enable_append(self, name: str, separator: str) -> None:
        """Make a regular flag append new values with `separator`."""
        flag = self.registry.lookup(name)
        if not isinstance(flag, RegularFlag):
            raise ConfigurationError(f"Cannot enable append for {flag.describe()}")
        if not separator:
            raise ConfigurationError("append separator must be a non-empty string")
        flag.append_sep = separator

    def disable_append(self, name: str) -> None:
        flag = self.registry.lookup(name)
        if not isinstance(flag, RegularFlag):
            raise ConfigurationError(f"Cannot disable append for {flag.describe()}")
        flag.append_sep = None

    def set_help(self, keyword: str | None = "help", alias: str | None = "h") -> None:
        """Set the help triggers. `None` disables a trigger."""
        self.triggers.help_keyword = keyword
        self.triggers.help_alias = alias

    def disable_help(self) -> None:
        self.set_help(None, None)

    def set_version(
        self,
        version: str,
        keyword: str | None = "version",
        alias: str | None = "V",
    ) -> None:
        """Set the version string and enable the version triggers."""
        self.version = version
        self.triggers.version_keyword = keyword
        self.triggers.version_alias = alias

    def disable_version(self) -> None:
        self.triggers.version_keyword = None
        self.triggers.version_alias = None

    def reset(self) -> None:
        """Clear every flag value and all per-parse state. Declarations are kept."""
        self.registry.reset()
        self._dispatcher.clear()
        self.diagnostics = []
        self.last_outcome = None

    # Parsing

    def _emit(self, level: int, message: str, token: str | None = None) -> None:
        diagnostic = Diagnostic(level=level, message=message, token=token)
        self.diagnostics.append(diagnostic)
        if token is None:
            logger.log(level, "%s", message)
        else:
            logger.log(level, "%s [token: %s]", message, token)
        if self.sink is not None:
            self.sink(diagnostic)

    def parse(self, args: Sequence[str] | None = None) -> ParseOutcome:
        """
        Parse a token list and validate the result.

        Args:
            args (Sequence[str] | None): Tokens without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            ParseOutcome: OK, HELP, VERSION or VALIDATION_FAILED with failures.

        Raises:
            ParseError: When a token cannot be parsed. Flag values are restored
                to what they were before this call.
        """
        if args is None:
            args = sys.argv[1:]
        tokens = list(args)
        self.diagnostics = []
        self.last_outcome = None
        snapshot = [flag.save_state() for flag in self.registry]
        logger.debug("Parsing %d token(s): %s", len(tokens), tokens)

        try:
            self._dispatcher.dispatch(tokens)
        except HelpSignal:
            self.last_outcome = ParseOutcome(ParseStatus.HELP)
            return self.last_outcome
        except VersionSignal:
            self.last_outcome = ParseOutcome(ParseStatus.VERSION)
            return self.last_outcome
        except ParseError as error:
            for flag, state in zip(self.registry, snapshot):
                flag.restore_state(state)
            self._dispatcher.clear()
            self._emit(logging.ERROR, str(error), error.token)
            raise

        failures = validate(self.registry)
        status = ParseStatus.VALIDATION_FAILED if failures else ParseStatus.OK
        self.last_outcome = ParseOutcome(
            status, tuple(failures), tuple(self._dispatcher.omitted)
        )
        return self.last_outcome

    # Queries

    def get_flag(self, name: str) -> Flag:
        return self.registry.lookup(name)

    def is_set(self, name: str) -> bool:
        return self.registry.lookup(name).is_set()

    def get_value(self, name: str, fallback: str | None = None) -> str | None:
        """
        Return the value of `name`.

        Regular flags fall back to their default first; `fallback` is returned
        only when there is neither a value nor a default.
        """
        value = self.registry.lookup(name).get_value()
        return fallback if value is None else value

    def get_iterable(self, name: str) -> list[str]:
        return self.registry.lookup(name).get_iterable()

    def get_positional(self) -> list[str]:
        """Every positional token of the last parse, in arrival order."""
        return list(self._dispatcher.queue)

    def get_omitted(self) -> list[str]:
        """Positional tokens no declared positional flag could take."""
        return list(self._dispatcher.omitted)

    def get_numerical(self) -> int | None:
        return self._dispatcher.numerical

    @property
    def state(self) -> DispatchState:
        return self._dispatcher.state

    # Rendering

    def get_version(self) -> str:
        """Return `program [version]`."""
        if self.version:
            return f"{self.program} {self.version}"
        return self.program

    def get_help_trigger(self) -> str | None:
        """Return the help trigger a user can type (`--help` or `-h`), or None if disabled."""
        keyword = self.triggers.help_keyword
        if keyword and self._dispatcher.is_help_keyword(keyword):
            return f"--{keyword}"
        alias = self.triggers.help_alias
        if alias and self._dispatcher.is_help_alias(alias):
            return f"-{alias}"
        return None

    def _trigger_rows(self) -> list[tuple[str, str]]:
        rows = []
        help_flags = []
        if self._dispatcher.is_help_keyword(self.triggers.help_keyword or ""):
            help_flags.append(f"--{self.triggers.help_keyword}")
        if self._dispatcher.is_help_alias(self.triggers.help_alias or ""):
            help_flags.append(f"-{self.triggers.help_alias}")
        if help_flags:
            rows.append((", ".join(help_flags), "Show this help message and exit."))
        version_flags = []
        if self._dispatcher.is_version_keyword(self.triggers.version_keyword or ""):
            version_flags.append(f"--{self.triggers.version_keyword}")
        if self._dispatcher.is_version_alias(self.triggers.version_alias or ""):
            version_flags.append(f"-{self.triggers.version_alias}")
        if version_flags:
            rows.append((", ".join(version_flags), "Show version information and exit."))
        return rows

    def _flag_row(self, flag: Flag) -> tuple[str, str]:
        if isinstance(flag, PositionalFlag):
            flags = flag.name
        else:
            flags = f"--{flag.name}"
            if flag.alias:
                flags = f"{flags}, -{flag.alias}"
            metavar = flag.get_metavar_text()
            if metavar:
                flags = f"{flags} {metavar}"

        notes = []
        if isinstance(flag, RegularFlag):
            if flag.default is not None:
                notes.append(f"default: {flag.default}")
            if flag.append_sep:
                notes.append(f"appends with {flag.append_sep!r}")
        if isinstance(flag, MultiFlag) and (flag.lowest or flag.saturation):
            notes.append(f"values: {flag.get_arity_text()}")
        if flag.is_obligatory():
            notes.append("obligatory")

        help_text = flag.help
        if notes:
            help_text = f"{help_text} ({'; '.join(notes)})".strip()
        return flags, help_text

    def get_help_sections(self) -> list[tuple[str, list[tuple[str, str]]]]:
        """Help rows grouped by kind: Positional, Regular, Multi, Switch."""
        sections = []
        for kind in FlagKind:
            flags: Sequence[Flag]
            if kind == FlagKind.POSITIONAL:
                flags = self.registry.positionals()
            else:
                flags = self.registry.of_kind(kind)
            rows = [self._flag_row(flag) for flag in flags]
            if kind == FlagKind.SWITCH:
                rows.extend(self._trigger_rows())
            if rows:
                sections.append((kind.label, rows))
        return sections

    def get_usage(self) -> str:
        """Render the usage line for this parser."""
        parts = [self.program]
        for flag in self.registry:
            if isinstance(flag, PositionalFlag):
                continue
            short = f"-{flag.alias}" if flag.alias else f"--{flag.name}"
            metavar = flag.get_metavar_text()
            text = f"{short} {metavar}" if metavar else short
            if isinstance(flag, MultiFlag) and flag.saturation != 1:
                text = f"{text} ..."
            parts.append(text if flag.is_obligatory() else f"[{text}]")
        for flag in self.registry.positionals():
            text = flag.name
            if flag.saturation == 0 or flag.saturation > 1:
                text = f"{text} ..."
            parts.append(text if flag.lowest else f"[{text}]")
        return " ".join(parts)

    def _format_row(self, flags: str, help_text: str) -> str:
        line = f"  {flags:<{HELP_COLUMN}} "
        if help_text and len(flags) > HELP_COLUMN:
            help_text = f"\n{'':<{HELP_COLUMN + 3}}{help_text}"
        return f"{line}{help_text}".rstrip()

    def get_help(self) -> str:
        """Return the plain-text help, grouped by flag kind."""
        lines = [f"usage: {self.get_usage()}", ""]
        if self.description:
            lines.extend([self.description, ""])
        for label, rows in self.get_help_sections():
            lines.append(f"{label}:")
            lines.extend(self._format_row(flags, help_text) for flags, help_text in rows)
            lines.append("")
        if self.epilog:
            lines.append(self.epilog)
        return "\n".join(lines).rstrip() + "\n"

    def render_help(self) -> None:
        """Print the help text using Rich output."""
        self.console.print(f"[bold]usage: {escape(self.get_usage())}[/bold]\n")
        if self.description:
            self.console.print(escape(self.description) + "\n")
        for label, rows in self.get_help_sections():
            self.console.print(f"[heading]{label}:[/heading]")
            for flags, help_text in rows:
                self.console.print(escape(self._format_row(flags, help_text)))
        if self.epilog:
            self.console.print("\n" + escape(self.epilog), style="dim")

    def render_version(self) -> None:
        self.console.print(escape(self.get_version()))

    def get_report(self) -> str:
        """Plain-text report of the last parse's failures and omitted positionals."""
        if self.last_outcome is None:
            return ""
        return render_report(self.last_outcome.failures, self.last_outcome.omitted)

    def render_report(self) -> None:
        """Print the last parse's failures and omitted positionals using Rich output."""
        if self.last_outcome is None:
            return
        for failure in self.last_outcome.failures:
            self.console.print(
                f"[failure]error:[/failure] {FAILURE_TITLES[failure.kind]} -> "
                f"[flag]{escape(failure.name)}[/flag] [hint]({escape(failure.message)})[/hint]"
            )
        if self.last_outcome.omitted:
            plural = "s" if len(self.last_outcome.omitted) > 1 else ""
            self.console.print(
                f"[warning]warning:[/warning] Omitted positional argument{plural}: "
                f"{escape(', '.join(self.last_outcome.omitted))}"
            )

    def describe(self) -> str:
        """One line per flag with its current value, for debugging."""
        lines = ["Arguments:"]
        lines.extend(flag.describe() for flag in self.registry)
        return "\n".join(lines)

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __iter__(self) -> Iterator[Flag]:
        return iter(self.registry)

    def __len__(self) -> int:
        return len(self.registry)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = len(self.registry.positionals())
        obligatory = sum(flag.is_obligatory() for flag in self.registry)
        return (
            f"Arguments(flags={len(self.registry)}, "
            f"aliases={self.registry.alias_count}, "
            f"positional={positional}, obligatory={obligatory})"
        )

    def __repr__(self) -> str:
        return str(self)
