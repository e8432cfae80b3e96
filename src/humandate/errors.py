"""Exception hierarchy.

Unparseable input is never an exception: ``DateParser.parse`` returns
``None``. The errors below signal programmer or configuration mistakes.
"""

from __future__ import annotations


class HumanDateError(Exception):
    """Base class for every error raised by humandate."""


class ConfigurationError(HumanDateError):
    """A parser, formatter or registry was configured with an unusable value."""


class UnsupportedLanguageError(ConfigurationError, LookupError):
    """No language is registered under the requested code."""

    def __init__(self, code: str, available: list[str] | None = None):
        self.code = code
        self.available = available or []
        message = f"Unsupported language: {code!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class InvalidPatternError(ConfigurationError, ValueError):
    """A date pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid date pattern {pattern!r}: {reason}")


class InvalidArgumentError(HumanDateError, ValueError):
    """A required argument was ``None``."""


def require(value, name: str):
    """Return *value*, raising ``InvalidArgumentError`` when it is ``None``."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value
