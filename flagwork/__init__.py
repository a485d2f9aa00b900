"""
Flagwork CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import Arguments, FlagKind, ParseOutcome, ParseStatus
from .version import __version__

logger = logging.getLogger("flagwork")


__all__ = [
    "Arguments",
    "FlagKind",
    "ParseOutcome",
    "ParseStatus",
    "__version__",
]
