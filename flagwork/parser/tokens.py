# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification for the Flagwork dispatcher.

`classify()` looks at a single raw token, without any knowledge of the registry,
and decides which syntactic category it belongs to:

    --            SEPARATOR      everything after it is positional
    --name=value  ASSIGNMENT     (long=True)
    -c=value      ASSIGNMENT     (long=False)
    --name        LONG_FLAG
    -c            SHORT_FLAG
    -abc          SHORT_GROUP
    -42           NUMERAL
    value, -      POSITIONAL

Resolving names against registered flags is left to the dispatcher.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flagwork.parser.utils import parse_signed_int


class TokenKind(Enum):
    SEPARATOR = "separator"
    ASSIGNMENT = "assignment"
    LONG_FLAG = "long_flag"
    SHORT_FLAG = "short_flag"
    SHORT_GROUP = "short_group"
    NUMERAL = "numeral"
    POSITIONAL = "positional"


@dataclass(frozen=True)
class Token:
    """
    A classified token.

    Attributes:
        raw (str): The token exactly as it appeared in the argument list.
        kind (TokenKind): Syntactic category.
        name (str): Long name, alias character or group characters, without dashes.
        value (str | None): The right-hand side of an `=` assignment.
        long (bool): For assignments, whether the left-hand side used `--`.
        number (int | None): Parsed value of a NUMERAL token.
    """

    raw: str
    kind: TokenKind
    name: str = ""
    value: str | None = None
    long: bool = False
    number: int | None = None


def looks_like_flag(token: str) -> bool:
    """True for tokens that cannot be used as a flag value (`-x`, `--y`, but not `-`)."""
    return token.startswith("-") and token != "-"


def classify(raw: str) -> Token:
    """Classify a single raw token."""
    if raw == "--":
        return Token(raw, TokenKind.SEPARATOR)

    if not raw.startswith("-") or len(raw) == 1:
        return Token(raw, TokenKind.POSITIONAL)

    if "=" in raw:
        head, value = raw.split("=", 1)
        if head.startswith("--"):
            return Token(raw, TokenKind.ASSIGNMENT, name=head[2:], value=value, long=True)
        return Token(raw, TokenKind.ASSIGNMENT, name=head[1:], value=value)

    if raw.startswith("--"):
        return Token(raw, TokenKind.LONG_FLAG, name=raw[2:])

    if len(raw) == 2:
        return Token(raw, TokenKind.SHORT_FLAG, name=raw[1])

    group = raw[1:]
    number = parse_signed_int(group)
    if number is not None:
        return Token(raw, TokenKind.NUMERAL, name=group, number=number)
    return Token(raw, TokenKind.SHORT_GROUP, name=group)
