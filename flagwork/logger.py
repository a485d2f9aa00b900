# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for Flagwork."""
import logging

logger = logging.getLogger("flagwork")
