# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Flagwork CLI applications."""
from rich.console import Console

from flagwork.themes import get_flagwork_theme

console = Console(color_system="truecolor", theme=get_flagwork_theme())
