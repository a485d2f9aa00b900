# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the flag entities stored in a Flagwork registry.

Every flag owns an immutable `FlagInfo` (canonical name, optional one-character
alias, help text) and a kind-specific value container. All kinds share the
`Flag` interface used by the dispatcher, the validator and the query API:

- `is_set()` / `is_obligatory()`
- `accept(value)`: apply one value coming from the token stream
- `get_value()` / `get_iterable()`: read the value back
- `check()`: validation failures for this flag
- `describe()`: one-line debug description

Kinds:
- `SwitchFlag`: presence-only, `True` after the first occurrence.
- `RegularFlag`: single string with an optional default; with an append
  separator, repeated values are concatenated instead of replaced.
- `MultiFlag`: ordered list of values bounded by `lowest` and `saturation`.
- `PositionalFlag`: a `MultiFlag` filled from the positional queue, with a
  1-based declaration `position` used for help display.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from flagwork.exceptions import InvalidBoundsError, MissingValueError, SaturatedError
from flagwork.parser.flag_kind import FlagKind
from flagwork.parser.parser_types import FailureKind, ValidationFailure
from flagwork.parser.utils import join, split

VALUE_SEPARATOR = ","


@dataclass(frozen=True)
class FlagInfo:
    """Identity of a flag: canonical name, optional alias and help text."""

    name: str
    help: str = ""
    alias: str | None = None

    def has_alias(self) -> bool:
        return self.alias is not None

    def __str__(self) -> str:
        return self.name + (f"/{self.alias}" if self.alias else "")


class Flag(ABC):
    """Base class for every flag kind."""

    kind: FlagKind

    def __init__(self, info: FlagInfo) -> None:
        self.info = info

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def alias(self) -> str | None:
        return self.info.alias

    @property
    def help(self) -> str:
        return self.info.help

    @abstractmethod
    def is_set(self) -> bool:
        raise NotImplementedError("is_set must be implemented by subclasses")

    @abstractmethod
    def is_obligatory(self) -> bool:
        raise NotImplementedError("is_obligatory must be implemented by subclasses")

    def takes_value(self) -> bool:
        """True when the flag consumes a value token."""
        return True

    @abstractmethod
    def accept(self, value: str | None) -> None:
        raise NotImplementedError("accept must be implemented by subclasses")

    @abstractmethod
    def get_value(self) -> str | None:
        raise NotImplementedError("get_value must be implemented by subclasses")

    @abstractmethod
    def get_iterable(self) -> list[str]:
        raise NotImplementedError("get_iterable must be implemented by subclasses")

    @abstractmethod
    def reset(self) -> None:
        raise NotImplementedError("reset must be implemented by subclasses")

    @abstractmethod
    def save_state(self) -> object:
        """Return an opaque copy of the current value, for `restore_state()`."""
        raise NotImplementedError("save_state must be implemented by subclasses")

    @abstractmethod
    def restore_state(self, state: object) -> None:
        raise NotImplementedError("restore_state must be implemented by subclasses")

    def check(self) -> list[ValidationFailure]:
        if self.is_obligatory() and not self.is_set():
            return [
                ValidationFailure(
                    FailureKind.OBLIGATORY_UNSET,
                    self.name,
                    "obligatory argument was not set",
                )
            ]
        return []

    def get_metavar_text(self) -> str:
        """Placeholder shown after the flag in help output."""
        return self.name.upper().replace("-", "_")

    def _value_text(self) -> str:
        value = self.get_value()
        return "__Empty__" if value is None else value

    def describe(self) -> str:
        return f'{self.kind.label}: {self.info} Value: "{self._value_text()}"'

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, alias={self.alias!r})"


class SwitchFlag(Flag):
    """Presence-only flag; supplying it any number of times sets it to True."""

    kind = FlagKind.SWITCH

    def __init__(self, info: FlagInfo) -> None:
        super().__init__(info)
        self.value: bool = False

    def is_set(self) -> bool:
        return self.value

    def is_obligatory(self) -> bool:
        return False

    def takes_value(self) -> bool:
        return False

    def accept(self, value: str | None = None) -> None:
        self.value = True

    def get_value(self) -> str | None:
        return "" if self.value else None

    def get_iterable(self) -> list[str]:
        return []

    def get_metavar_text(self) -> str:
        return ""

    def reset(self) -> None:
        self.value = False

    def save_state(self) -> object:
        return self.value

    def restore_state(self, state: object) -> None:
        self.value = bool(state)

    def describe(self) -> str:
        state = "__Set__" if self.value else "__NotSet__"
        return f'{self.kind.label}: {self.info} Value: "{state}"'


class RegularFlag(Flag):
    """
    Single-valued flag.

    Attributes:
        default (str | None): Returned by `get_value()` while the flag is unset.
        append_sep (str | None): When set, each new value is appended to the
            existing one with this separator instead of replacing it.
        obligatory (bool): Validation fails when the flag is never supplied.
    """

    kind = FlagKind.REGULAR

    def __init__(
        self,
        info: FlagInfo,
        default: str | None = None,
        obligatory: bool = False,
        append_sep: str | None = None,
    ) -> None:
        super().__init__(info)
        self.value: str | None = None
        self.default = default
        self.obligatory = obligatory
        self.append_sep = append_sep

    def is_set(self) -> bool:
        return self.value is not None

    def is_obligatory(self) -> bool:
        return self.obligatory

    def is_appendable(self) -> bool:
        return bool(self.append_sep)

    def accept(self, value: str | None) -> None:
        if value is None:
            raise MissingValueError(f"Missing value for argument '{self.name}'")
        if self.is_appendable() and self.value is not None:
            self.value = f"{self.value}{self.append_sep}{value}"
        else:
            self.value = value

    def get_value(self) -> str | None:
        return self.value if self.value is not None else self.default

    def get_iterable(self) -> list[str]:
        value = self.get_value()
        if value is None:
            return []
        if not self.is_appendable():
            return [value]
        assert self.append_sep is not None
        return split(value, self.append_sep, keep_empty=True)

    def reset(self) -> None:
        self.value = None

    def save_state(self) -> object:
        return self.value

    def restore_state(self, state: object) -> None:
        assert state is None or isinstance(state, str)
        self.value = state


class MultiFlag(Flag):
    """
    Flag collecting an ordered list of values.

    `lowest` is the minimum number of values (0 = optional) and `saturation` the
    maximum (0 = unbounded). A non-zero saturation may never be below lowest.
    """

    kind = FlagKind.MULTI

    def __init__(
        self,
        info: FlagInfo,
        lowest: int = 0,
        saturation: int = 0,
        obligatory: bool = False,
    ) -> None:
        super().__init__(info)
        self.values: list[str] = []
        self.obligatory = obligatory
        self._lowest = 0
        self._saturation = 0
        validate_bounds(self.name, lowest, saturation)
        self._lowest = lowest
        self._saturation = saturation

    @property
    def lowest(self) -> int:
        return self._lowest

    @property
    def saturation(self) -> int:
        return self._saturation

    def set_lowest(self, lowest: int) -> None:
        validate_bounds(self.name, lowest, self._saturation)
        self._lowest = lowest

    def set_saturation(self, saturation: int) -> None:
        validate_bounds(self.name, self._lowest, saturation)
        self._saturation = saturation

    @property
    def count(self) -> int:
        return len(self.values)

    def is_set(self) -> bool:
        return bool(self.values)

    def is_obligatory(self) -> bool:
        return self.obligatory or self._lowest > 0

    def is_loadable(self) -> bool:
        return self._saturation == 0 or self.count < self._saturation

    def accept(self, value: str | None) -> None:
        if value is None:
            raise MissingValueError(f"Missing value for argument '{self.name}'")
        if not self.is_loadable():
            raise SaturatedError(
                f"Argument '{self.name}' accepts at most {self._saturation} "
                f"value{'s' if self._saturation != 1 else ''}",
                token=value,
            )
        self.values.append(value)

    def get_value(self) -> str | None:
        if not self.values:
            return None
        return join(self.values, VALUE_SEPARATOR)

    def get_iterable(self) -> list[str]:
        return list(self.values)

    def reset(self) -> None:
        self.values.clear()

    def save_state(self) -> object:
        return list(self.values)

    def restore_state(self, state: object) -> None:
        assert isinstance(state, list)
        self.values = list(state)

    def check(self) -> list[ValidationFailure]:
        failures = []
        if 0 < self._lowest and self.count < self._lowest:
            failures.append(
                ValidationFailure(
                    FailureKind.BELOW_LOWEST,
                    self.name,
                    f"expected at least {self._lowest} value(s), got {self.count}",
                )
            )
        elif self.obligatory and not self.is_set():
            failures.extend(super().check())
        if 0 < self._saturation < self.count:
            failures.append(
                ValidationFailure(
                    FailureKind.ABOVE_SATURATION,
                    self.name,
                    f"expected at most {self._saturation} value(s), got {self.count}",
                )
            )
        return failures

    def get_arity_text(self) -> str:
        """Human-readable value count bounds, e.g. `1..3`, `2`, `0..*`."""
        upper = str(self._saturation) if self._saturation else "*"
        if upper == str(self._lowest):
            return upper
        return f"{self._lowest}..{upper}"


class PositionalFlag(MultiFlag):
    """Multi-valued flag filled, in declaration order, from the positional queue."""

    kind = FlagKind.POSITIONAL

    def __init__(
        self,
        info: FlagInfo,
        position: int = 1,
        lowest: int = 0,
        saturation: int = 0,
        obligatory: bool = False,
    ) -> None:
        super().__init__(info, lowest=lowest, saturation=saturation, obligatory=obligatory)
        self._position = 1
        self.set_position(position)

    @property
    def position(self) -> int:
        return self._position

    def set_position(self, position: int) -> None:
        if position < 1:
            raise InvalidBoundsError(
                f"Position of '{self.name}' must be a positive integer, got {position}"
            )
        self._position = position

    def get_metavar_text(self) -> str:
        return self.name

    def describe(self) -> str:
        return f"@{self._position} {super().describe()}"


def validate_bounds(name: str, lowest: int, saturation: int) -> None:
    """Raise `InvalidBoundsError` unless `0 <= lowest` and `saturation` is 0 or >= lowest."""
    if lowest < 0:
        raise InvalidBoundsError(f"Lowest value of '{name}' must be 0 or greater")
    if saturation < 0:
        raise InvalidBoundsError(f"Saturation value of '{name}' must be 0 or greater")
    if saturation and saturation < lowest:
        raise InvalidBoundsError(
            f"Saturation {saturation} of '{name}' is lower than the lowest "
            f"possible value {lowest}"
        )
