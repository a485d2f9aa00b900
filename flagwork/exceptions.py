# Flagwork CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Flagwork argument engine.

Errors come in two tiers. Configuration errors are programmer mistakes made while
declaring flags and are raised immediately by the registry. Parse errors are caused
by user-supplied tokens and abort the current `parse()` call; each one carries the
offending token so it can be reported back to the user.

Validation problems (missing obligatory flags, arity bounds) are not exceptions:
they are collected as `ValidationFailure` records on the parse outcome.

Exception Hierarchy:
- FlagworkError
    ├── ConfigurationError
    │   ├── InvalidNameError
    │   ├── DuplicateNameError
    │   ├── DuplicateAliasError
    │   └── InvalidBoundsError
    └── ParseError
        ├── MissingValueError
        ├── UnknownFlagError
        ├── UnknownArgumentError
        ├── AmbiguousAssignmentError
        └── SaturatedError
"""


class FlagworkError(Exception):
    """Base exception for the Flagwork argument engine."""


class ConfigurationError(FlagworkError):
    """Exception raised when flags are declared or configured incorrectly."""


class InvalidNameError(ConfigurationError):
    """Exception raised when a flag name or alias is malformed."""


class DuplicateNameError(ConfigurationError):
    """Exception raised when a canonical name is registered twice."""


class DuplicateAliasError(ConfigurationError):
    """Exception raised when an alias character is already bound to another flag."""


class InvalidBoundsError(ConfigurationError):
    """Exception raised when lowest/saturation bounds are negative or inverted."""


class ParseError(FlagworkError):
    """Exception raised when user-supplied tokens cannot be parsed."""

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class MissingValueError(ParseError):
    """Exception raised when a value-taking flag is given no value."""


class UnknownFlagError(ParseError):
    """Exception raised when a short alias is not bound to any flag."""


class UnknownArgumentError(ParseError):
    """Exception raised when a long name is not registered."""


class AmbiguousAssignmentError(ParseError):
    """Exception raised for `-abc=value`, which mixes grouping and assignment."""


class SaturatedError(ParseError):
    """Exception raised when a flag already holds its maximum number of values."""
