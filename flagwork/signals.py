# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the Flagwork dispatcher.

These signals interrupt the token scan when the user asks for help or version
information. They are not errors: `Arguments.parse()` catches them and turns them
into the `HELP` / `VERSION` parse outcomes.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: The help keyword or alias was found.
- VersionSignal: The version keyword or alias was found.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Flagwork.

    These are not errors. They stop the token scan early so the caller can
    print help or version text and exit successfully.
    """


class HelpSignal(FlowSignal):
    """Raised to request help output."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised to request version output."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
