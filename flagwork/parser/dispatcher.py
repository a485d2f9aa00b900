# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The token dispatcher: the state machine behind `Arguments.parse()`.

The dispatcher walks the argument list left to right. Each token is classified
(see `flagwork.parser.tokens`) and routed either to a registered flag or to the
positional queue. When the scan is complete, the queue is drained into the
declared positional flags in declaration order.

States:
- SCANNING: normal flag parsing.
- POSITIONAL_ONLY: entered after a bare `--`; every later token is positional.
- HELP_REQUESTED / VERSION_REQUESTED: terminal. The dispatcher raises
  `HelpSignal` / `VersionSignal` and consumes nothing more.

Value-taking flags consume the following token (`--out file`, `-o file`), the
right-hand side of `=` (`--out=file`, `-o=file`), or the rest of a short group
(`-vofile`). A following token that starts with `-` (other than `-` itself) is
never taken as a value.

Positional values that no positional flag can hold any more are *omitted*: they
are reported as a warning diagnostic instead of failing the parse.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, NoReturn, Sequence

from flagwork.exceptions import (
    AmbiguousAssignmentError,
    MissingValueError,
    UnknownFlagError,
)
from flagwork.parser.flags import Flag
from flagwork.parser.registry import FlagRegistry
from flagwork.parser.tokens import Token, TokenKind, classify, looks_like_flag
from flagwork.signals import HelpSignal, VersionSignal

Emitter = Callable[[int, str, str | None], None]


class DispatchState(Enum):
    SCANNING = "scanning"
    POSITIONAL_ONLY = "positional_only"
    HELP_REQUESTED = "help_requested"
    VERSION_REQUESTED = "version_requested"


@dataclass
class Triggers:
    """
    Built-in help/version triggers.

    A trigger whose keyword or alias is also used by a registered flag is
    silently disabled; the user flag wins.
    """

    help_keyword: str | None = "help"
    help_alias: str | None = "h"
    version_keyword: str | None = None
    version_alias: str | None = None


class Dispatcher:
    """Routes tokens to flags of a `FlagRegistry`."""

    def __init__(
        self,
        registry: FlagRegistry,
        triggers: Triggers,
        emit: Emitter,
    ) -> None:
        self.registry = registry
        self.triggers = triggers
        self.emit = emit
        self.state = DispatchState.SCANNING
        self.queue: list[str] = []
        self.omitted: list[str] = []
        self.numerical: int | None = None

    def clear(self) -> None:
        self.state = DispatchState.SCANNING
        self.queue = []
        self.omitted = []
        self.numerical = None

    def is_help_keyword(self, name: str) -> bool:
        keyword = self.triggers.help_keyword
        return bool(keyword) and name == keyword and not self.registry.contains(name)

    def is_help_alias(self, alias: str) -> bool:
        trigger = self.triggers.help_alias
        return bool(trigger) and alias == trigger and not self.registry.alias_bound(alias)

    def is_version_keyword(self, name: str) -> bool:
        keyword = self.triggers.version_keyword
        return bool(keyword) and name == keyword and not self.registry.contains(name)

    def is_version_alias(self, alias: str) -> bool:
        trigger = self.triggers.version_alias
        return bool(trigger) and alias == trigger and not self.registry.alias_bound(alias)

    def _request_help(self, token: str) -> NoReturn:
        self.state = DispatchState.HELP_REQUESTED
        self.emit(logging.DEBUG, "Help requested", token)
        raise HelpSignal()

    def _request_version(self, token: str) -> NoReturn:
        self.state = DispatchState.VERSION_REQUESTED
        self.emit(logging.DEBUG, "Version requested", token)
        raise VersionSignal()

    def _resolve_long(self, name: str, raw: str) -> Flag:
        if self.is_help_keyword(name):
            self._request_help(raw)
        if self.is_version_keyword(name):
            self._request_version(raw)
        return self.registry.lookup(name)

    def _resolve_alias(self, alias: str, raw: str) -> Flag:
        if self.is_help_alias(alias):
            self._request_help(raw)
        if self.is_version_alias(alias):
            self._request_version(raw)
        return self.registry.lookup_by_alias(alias)

    def _apply(self, flag: Flag, next_token: str | None, raw: str) -> int:
        """Apply `flag`, taking `next_token` as its value if needed. Returns tokens consumed."""
        if not flag.takes_value():
            flag.accept(None)
            self.emit(logging.DEBUG, f"Set switch '{flag.name}'", raw)
            return 0
        if next_token is None or looks_like_flag(next_token):
            raise MissingValueError(f"Missing value for argument '{flag.name}'", token=raw)
        flag.accept(next_token)
        self.emit(logging.DEBUG, f"Assigned {next_token!r} to '{flag.name}'", raw)
        return 1

    def _assign(self, token: Token) -> None:
        assert token.value is not None
        if token.long:
            flag = self._resolve_long(token.name, token.raw)
        elif len(token.name) == 1:
            flag = self._resolve_alias(token.name, token.raw)
        elif not token.name:
            raise UnknownFlagError(f"Missing flag before '=' in '{token.raw}'", token.raw)
        else:
            raise AmbiguousAssignmentError(
                f"Using assignment symbol '=' with joined flags is forbidden: {token.raw}",
                token=token.raw,
            )
        flag.accept(token.value)
        self.emit(logging.DEBUG, f"Assigned {token.value!r} to '{flag.name}'", token.raw)

    def _parse_group(self, token: Token) -> None:
        group = token.name
        for position, char in enumerate(group):
            if self.is_help_alias(char):
                self._request_help(token.raw)
            if self.is_version_alias(char):
                self._request_version(token.raw)
            if not self.registry.alias_bound(char):
                raise UnknownFlagError(
                    f"Could not recognize one of these flags: {token.raw}",
                    token=token.raw,
                )
            flag = self.registry.lookup_by_alias(char)
            if not flag.takes_value():
                flag.accept(None)
                self.emit(logging.DEBUG, f"Set switch '{flag.name}'", token.raw)
                continue
            value = group[position + 1 :]
            if not value:
                raise MissingValueError(
                    f"Missing value for argument '{flag.name}'", token=token.raw
                )
            flag.accept(value)
            self.emit(logging.DEBUG, f"Assigned {value!r} to '{flag.name}'", token.raw)
            return

    def _set_numerical(self, number: int, raw: str) -> None:
        self.numerical = number
        self.emit(logging.DEBUG, f"Numerical argument set to {number}", raw)

    def _handle_token(self, raw: str, next_token: str | None) -> int:
        token = classify(raw)
        match token.kind:
            case TokenKind.SEPARATOR:
                self.state = DispatchState.POSITIONAL_ONLY
                self.emit(logging.DEBUG, "Remaining tokens are positional", raw)
            case TokenKind.ASSIGNMENT:
                self._assign(token)
            case TokenKind.LONG_FLAG:
                return self._apply(self._resolve_long(token.name, raw), next_token, raw)
            case TokenKind.SHORT_FLAG:
                return self._apply(self._resolve_alias(token.name, raw), next_token, raw)
            case TokenKind.NUMERAL:
                assert token.number is not None
                self._set_numerical(token.number, raw)
            case TokenKind.SHORT_GROUP:
                self._parse_group(token)
            case TokenKind.POSITIONAL:
                self.queue.append(raw)
        return 0

    def dispatch(self, args: Sequence[str]) -> None:
        """
        Consume `args` and mutate the registry.

        Raises:
            HelpSignal | VersionSignal: When help or version is requested.
            ParseError: On the first token that cannot be parsed.
        """
        self.clear()
        index = 0
        while index < len(args):
            if self.state in (
                DispatchState.HELP_REQUESTED,
                DispatchState.VERSION_REQUESTED,
            ):
                break
            raw = args[index]
            if self.state == DispatchState.POSITIONAL_ONLY:
                self.queue.append(raw)
                index += 1
                continue
            next_token = args[index + 1] if index + 1 < len(args) else None
            index += 1 + self._handle_token(raw, next_token)

        self.drain_positionals()

    def drain_positionals(self) -> None:
        """Fill declared positional flags from the queue, in declaration order."""
        index = 0
        for flag in self.registry.positionals():
            while index < len(self.queue) and flag.is_loadable():
                flag.accept(self.queue[index])
                index += 1
        self.omitted = self.queue[index:]
        if self.omitted:
            self.emit(
                logging.WARNING,
                f"Omitted positional argument{'s' if len(self.omitted) > 1 else ''}: "
                f"{', '.join(self.omitted)}",
                None,
            )
