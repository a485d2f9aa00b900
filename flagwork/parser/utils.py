# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
String helpers consumed by the Flagwork argument engine.

These are the small collaborators the registry and dispatcher rely on to turn
stored values into sequences, sequences back into display strings, and to detect
numeral tokens such as `-42`.

Functions:
- split: Split an appended value back into its fields.
- join: Join a sequence of values for display.
- parse_signed_int: Parse an optionally signed decimal integer, or return None.
"""
import re
from typing import Iterable

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


def split(source: str, separator: str, keep_empty: bool = True) -> list[str]:
    """
    Split `source` on `separator`.

    Args:
        source (str): The string to split.
        separator (str): Non-empty field separator.
        keep_empty (bool): Keep empty fields produced by adjacent separators.

    Returns:
        list[str]: The fields in order.
    """
    if not separator:
        raise ValueError("separator cannot be empty")
    fields = source.split(separator)
    if keep_empty:
        return fields
    return [field for field in fields if field]


def join(values: Iterable[str], separator: str) -> str:
    """Join `values` with `separator`; an empty sequence gives an empty string."""
    return separator.join(values)


def parse_signed_int(token: str) -> int | None:
    """
    Parse `token` as an optionally signed decimal integer.

    Only ASCII digits with an optional leading `+` or `-` are accepted, so tokens
    like `1_000`, `0x10` or ` 7` are not numerals.

    Returns:
        int | None: The parsed integer, or None when `token` is not a numeral.
    """
    if not _SIGNED_INT.fullmatch(token):
        return None
    return int(token)
