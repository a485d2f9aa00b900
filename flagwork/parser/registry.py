# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagRegistry`, the store of every flag declared on an `Arguments` parser.

Flags live in a single arena list in registration order. Two indexes point into
that arena by slot number: canonical name → slot, and alias character → slot.
Positional flags are additionally recorded in declaration order, which decides
which positional flag each arriving positional value fills.

Registration is create-once and atomic: every check runs before anything is
stored, so a failed `register()` leaves the registry unchanged.
"""
from __future__ import annotations

from typing import Iterator

from flagwork.exceptions import (
    ConfigurationError,
    DuplicateAliasError,
    DuplicateNameError,
    InvalidNameError,
    UnknownArgumentError,
    UnknownFlagError,
)
from flagwork.logger import logger
from flagwork.parser.flag_kind import FlagKind
from flagwork.parser.flags import (
    Flag,
    FlagInfo,
    MultiFlag,
    PositionalFlag,
    RegularFlag,
    SwitchFlag,
    validate_bounds,
)


class FlagRegistry:
    """Arena of flags plus name and alias indexes."""

    def __init__(self) -> None:
        self._flags: list[Flag] = []
        self._names: dict[str, int] = {}
        self._aliases: dict[str, int] = {}
        self._positional_order: list[int] = []

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str):
            raise InvalidNameError(f"Name '{name}' must be a string")
        if not name:
            raise InvalidNameError("Name of argument cannot be empty")
        if name.startswith("-"):
            raise InvalidNameError(f"Name '{name}' cannot start with '-' sign")
        if any(char.isspace() for char in name) or "=" in name:
            raise InvalidNameError(
                f"Name '{name}' cannot contain whitespace or '=' characters"
            )
        if name in self._names:
            existing = self._flags[self._names[name]]
            raise DuplicateNameError(
                f"Argument '{name}' already exists as a {existing.kind} flag"
            )

    def _validate_alias(self, alias: str | None) -> None:
        if alias is None:
            return
        if not isinstance(alias, str) or len(alias) != 1:
            raise InvalidNameError(f"Alias {alias!r} must be a single character")
        if alias in "-= " or alias.isspace():
            raise InvalidNameError(f"Alias {alias!r} is not a valid flag character")
        if alias in self._aliases:
            bound = self._flags[self._aliases[alias]].name
            raise DuplicateAliasError(
                f"Flag '{alias}' already bound to argument '{bound}'"
            )

    def _validate_options(
        self,
        kind: FlagKind,
        name: str,
        alias: str | None,
        default: str | None,
        obligatory: bool,
        append_sep: str | None,
        lowest: int,
        saturation: int,
    ) -> None:
        if kind == FlagKind.SWITCH and obligatory:
            raise ConfigurationError("Switch flags cannot be obligatory")
        if kind == FlagKind.POSITIONAL and alias is not None:
            raise ConfigurationError("Positional flags cannot have an alias")
        if kind != FlagKind.REGULAR:
            if default is not None:
                raise ConfigurationError(f"default cannot be specified for {kind} flags")
            if append_sep is not None:
                raise ConfigurationError(
                    f"append separator cannot be specified for {kind} flags"
                )
        elif append_sep is not None and (
            not isinstance(append_sep, str) or not append_sep
        ):
            raise ConfigurationError("append separator must be a non-empty string")
        if kind in (FlagKind.MULTI, FlagKind.POSITIONAL):
            validate_bounds(name, lowest, saturation)
        elif lowest or saturation:
            raise ConfigurationError(
                f"lowest/saturation cannot be specified for {kind} flags"
            )

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
        """
        Create and store one flag.

        Args:
            kind (FlagKind | str): The flag kind; strings are coerced via `FlagKind`.
            name (str): Canonical long name, non-empty, not starting with `-`.
            help (str): Help text.
            alias (str | None): Optional single-character short form.
            default (str | None): Regular flags only.
            obligatory (bool): Not allowed for switches.
            append_sep (str | None): Regular flags only.
            lowest (int): Multi/positional flags only; minimum value count.
            saturation (int): Multi/positional flags only; maximum value count (0 = unbounded).

        Returns:
            Flag: The new flag entity.

        Raises:
            InvalidNameError, DuplicateNameError, DuplicateAliasError,
            InvalidBoundsError, ConfigurationError
        """
        if not isinstance(kind, FlagKind):
            try:
                kind = FlagKind(kind)
            except ValueError as error:
                raise ConfigurationError(str(error)) from error

        self._validate_name(name)
        self._validate_alias(alias)
        self._validate_options(
            kind, name, alias, default, obligatory, append_sep, lowest, saturation
        )

        info = FlagInfo(name=name, help=help or "", alias=alias)
        flag: Flag
        if kind == FlagKind.SWITCH:
            flag = SwitchFlag(info)
        elif kind == FlagKind.REGULAR:
            flag = RegularFlag(
                info, default=default, obligatory=obligatory, append_sep=append_sep
            )
        elif kind == FlagKind.MULTI:
            flag = MultiFlag(
                info, lowest=lowest, saturation=saturation, obligatory=obligatory
            )
        else:
            flag = PositionalFlag(
                info,
                position=len(self._positional_order) + 1,
                lowest=lowest,
                saturation=saturation,
                obligatory=obligatory,
            )

        slot = len(self._flags)
        self._flags.append(flag)
        self._names[name] = slot
        if alias is not None:
            self._aliases[alias] = slot
        if kind == FlagKind.POSITIONAL:
            self._positional_order.append(slot)
        logger.debug("Registered %s flag '%s'", kind, info)
        return flag

    def contains(self, name: str) -> bool:
        return name in self._names

    def alias_bound(self, alias: str) -> bool:
        return alias in self._aliases

    def lookup(self, name: str) -> Flag:
        """Return the flag registered under `name` or raise `UnknownArgumentError`."""
        try:
            return self._flags[self._names[name]]
        except KeyError:
            raise UnknownArgumentError(
                f"Argument '{name}' does not exist", token=f"--{name}"
            ) from None

    def lookup_by_alias(self, alias: str) -> Flag:
        """Return the flag bound to `alias` or raise `UnknownFlagError`."""
        try:
            return self._flags[self._aliases[alias]]
        except KeyError:
            raise UnknownFlagError(
                f"Symbol '{alias}' is not a valid flag", token=f"-{alias}"
            ) from None

    def positionals(self) -> list[PositionalFlag]:
        """Positional flags in declaration order."""
        flags = []
        for slot in self._positional_order:
            flag = self._flags[slot]
            assert isinstance(flag, PositionalFlag)
            flags.append(flag)
        return flags

    def of_kind(self, kind: FlagKind) -> list[Flag]:
        return [flag for flag in self._flags if flag.kind == kind]

    def reset(self) -> None:
        """Clear every stored value; declarations are kept."""
        for flag in self._flags:
            flag.reset()

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    @property
    def alias_count(self) -> int:
        return len(self._aliases)
