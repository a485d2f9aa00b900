# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and state models shared by the Flagwork registry, dispatcher and validator.

Contents:
- `ParseStatus` / `ParseOutcome`: What `Arguments.parse()` returns.
- `FailureKind` / `ValidationFailure`: Problems collected by the post-parse validator.
- `Diagnostic`: Structured trace records emitted by the dispatcher to an injectable sink.
- `DiagnosticSink`: Callable type accepted by `Arguments(sink=...)`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class ParseStatus(Enum):
    """Overall result of one `parse()` call."""

    OK = "ok"
    HELP = "help"
    VERSION = "version"
    VALIDATION_FAILED = "validation_failed"


class FailureKind(Enum):
    """Kinds of problems found by the validator."""

    OBLIGATORY_UNSET = "obligatory_unset"
    BELOW_LOWEST = "below_lowest"
    ABOVE_SATURATION = "above_saturation"


@dataclass(frozen=True)
class ValidationFailure:
    """One validation problem for one flag."""

    kind: FailureKind
    name: str
    message: str

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of `Arguments.parse()`.

    Attributes:
        status (ParseStatus): OK, HELP, VERSION or VALIDATION_FAILED.
        failures (tuple[ValidationFailure, ...]): Every validation failure found.
        omitted (tuple[str, ...]): Positional values no declared positional could take.
    """

    status: ParseStatus
    failures: tuple[ValidationFailure, ...] = ()
    omitted: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        """Number of validation failures."""
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return self.status == ParseStatus.OK

    @property
    def exit_code(self) -> int:
        """Conventional process exit code for this outcome."""
        if self.status == ParseStatus.VALIDATION_FAILED:
            return 2
        return 0


@dataclass(frozen=True)
class Diagnostic:
    """A single trace record produced while dispatching tokens."""

    level: int
    message: str
    token: str | None = None

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)


DiagnosticSink = Callable[[Diagnostic], None]
