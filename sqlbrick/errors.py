"""Custom exception hierarchy for sqlbrick.

All public errors inherit from SQLBrickError so callers can catch the base
class for any sqlbrick-specific failure.  Errors raised by deferred value
callbacks are never wrapped; they surface unchanged from the getter that
triggered evaluation.
"""
from __future__ import annotations

from typing import Any


class SQLBrickError(Exception):
    """Base exception for all sqlbrick errors."""


class InvalidArgument(SQLBrickError, TypeError):
    """Raised when a call receives a value of the wrong kind.

    Subclasses ``TypeError`` so callers that already guard fragment
    construction with ``except TypeError`` keep working.

    Args:
        message: Human-readable description.
        value: The offending value.
        expected: Short description of what was expected (e.g. ``'str'``).
    """

    def __init__(self, message: str, value: Any = None, expected: str | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.expected = expected

    @classmethod
    def for_value(cls, what: str, expected: str, value: Any) -> "InvalidArgument":
        """Build the standard message naming the value and its actual type.

        Args:
            what: Which argument was wrong (e.g. ``'Fragment delimiter'``).
            expected: What it should have been.
            value: What was received.
        """
        return cls(
            f"{what} should be {expected}, received: {value!r} with type {type(value).__name__}.",
            value=value,
            expected=expected,
        )


class CompilationError(SQLBrickError):
    """Raised when a fragment cannot be rendered for a dialect.

    Args:
        message: Human-readable description.
        dialect: The dialect target involved, when known.
    """

    def __init__(self, message: str, dialect: str | None = None) -> None:
        super().__init__(message)
        self.dialect = dialect
