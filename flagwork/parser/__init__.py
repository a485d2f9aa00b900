"""
Flagwork CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arguments import Arguments
from .dispatcher import DispatchState
from .flag_kind import FlagKind
from .flags import Flag, FlagInfo, MultiFlag, PositionalFlag, RegularFlag, SwitchFlag
from .parser_types import (
    Diagnostic,
    FailureKind,
    ParseOutcome,
    ParseStatus,
    ValidationFailure,
)
from .registry import FlagRegistry

__all__ = [
    "Arguments",
    "DispatchState",
    "Diagnostic",
    "FailureKind",
    "Flag",
    "FlagInfo",
    "FlagKind",
    "FlagRegistry",
    "MultiFlag",
    "ParseOutcome",
    "ParseStatus",
    "PositionalFlag",
    "RegularFlag",
    "SwitchFlag",
    "ValidationFailure",
]
