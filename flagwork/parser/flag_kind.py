# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagKind`, the enum that tags the four kinds of flags a Flagwork
registry can hold.

Supports alias coercion for shorthand or config-friendly values, so definitions
loaded from YAML/TOML can use familiar argparse-style words.

Exports:
    - FlagKind: Enum of flag kinds.

Example:
    FlagKind("switch")  → FlagKind.SWITCH
    FlagKind("store")   → FlagKind.REGULAR (via alias)
    FlagKind("append")  → FlagKind.MULTI (via alias)
"""
from __future__ import annotations

from enum import Enum


class FlagKind(Enum):
    """
    Kind of a registered flag.

    Members:
        SWITCH: Presence-only flag, `True` once supplied.
        REGULAR: Single string value, optionally appended with a separator.
        MULTI: Ordered list of values bounded by lowest/saturation.
        POSITIONAL: Like MULTI, but filled from the positional queue.

    Aliases:
        - "bool", "flag", "store_true" → "switch"
        - "store", "option", "value" → "regular"
        - "append", "many", "extend" → "multi"
        - "cardinal", "operand" → "positional"

    Help rendering groups flags in the order POSITIONAL, REGULAR, MULTI, SWITCH.
    """

    POSITIONAL = "positional"
    REGULAR = "regular"
    MULTI = "multi"
    SWITCH = "switch"

    @classmethod
    def choices(cls) -> list[FlagKind]:
        """Return a list of all flag kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "switch",
            "flag": "switch",
            "store_true": "switch",
            "store": "regular",
            "option": "regular",
            "value": "regular",
            "append": "multi",
            "many": "multi",
            "extend": "multi",
            "cardinal": "positional",
            "operand": "positional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def label(self) -> str:
        """Heading used for this kind in help output."""
        return self.value.capitalize()

    def __str__(self) -> str:
        """Return the string representation of the flag kind."""
        return self.value
