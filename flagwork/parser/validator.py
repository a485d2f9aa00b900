# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Post-parse validation and reporting.

`validate()` visits every registered flag in registration order and collects the
failures each one reports through `Flag.check()`:

- OBLIGATORY_UNSET: an obligatory flag was never supplied.
- BELOW_LOWEST: a multi/positional flag holds fewer values than `lowest`.
- ABOVE_SATURATION: a multi/positional flag holds more values than `saturation`.

Nothing is raised; the caller gets the complete list so one report can describe
every problem at once. `render_report()` turns failures and omitted positional
values into plain text lines.
"""
from __future__ import annotations

from typing import Sequence

from flagwork.logger import logger
from flagwork.parser.parser_types import FailureKind, ValidationFailure
from flagwork.parser.registry import FlagRegistry

FAILURE_TITLES = {
    FailureKind.OBLIGATORY_UNSET: "Obligatory argument not set",
    FailureKind.BELOW_LOWEST: "Not enough values",
    FailureKind.ABOVE_SATURATION: "Too many values",
}


def validate(registry: FlagRegistry) -> list[ValidationFailure]:
    """Return every validation failure in the registry."""
    failures: list[ValidationFailure] = []
    for flag in registry:
        for failure in flag.check():
            logger.info("%s -> %s", FAILURE_TITLES[failure.kind], failure)
            failures.append(failure)
    return failures


def render_report(
    failures: Sequence[ValidationFailure], omitted: Sequence[str] = ()
) -> str:
    """
    Render a plain-text report of validation failures and omitted positionals.

    Returns an empty string when there is nothing to report.
    """
    lines = [
        f"error: {FAILURE_TITLES[failure.kind]} -> {failure.name} ({failure.message})"
        for failure in failures
    ]
    if omitted:
        plural = "s" if len(omitted) > 1 else ""
        lines.append(f"warning: Omitted positional argument{plural}: {', '.join(omitted)}")
    if failures:
        plural = "s" if len(failures) > 1 else ""
        lines.append(f"{len(failures)} validation failure{plural}")
    return "\n".join(lines)
