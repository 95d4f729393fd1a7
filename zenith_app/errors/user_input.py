"""
User input error classifications for form and routine validation.

These exceptions are raised synchronously at the input boundary. They carry a
user-facing message and never leave partially applied state behind.
"""

from typing import Any, Dict, Optional


class UserInputError(Exception):
    """Base class for rejected user input that the caller can report and ignore."""

    title = "Invalid Input"

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.field = field
        self.value = value
        self.context = context or {}
        self.recoverable = True

    @property
    def user_message(self) -> str:
        return str(self)


class InvalidDurationError(UserInputError):
    """Routine item duration below the configured minimum."""

    def __init__(self, message: str, min_duration: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.min_duration = min_duration


class EmptyNameError(UserInputError):
    """Blank name for a routine item or meal."""


class OutOfRangeError(UserInputError):
    """Numeric value outside the accepted bounds."""

    def __init__(self, message: str, minimum: Optional[float] = None,
                 maximum: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.minimum = minimum
        self.maximum = maximum


class InvalidDateError(UserInputError):
    """Date string that cannot be parsed as an ISO calendar date."""


class TextTooShortError(UserInputError):
    """Free text below the minimum length."""

    def __init__(self, message: str, min_length: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.min_length = min_length


class UnknownItemError(UserInputError):
    """Referenced entry id does not exist."""


class NoEntriesError(UserInputError):
    """Operation requires at least one entry and none exist."""

    title = "No Entries"


class EmptySequenceError(NoEntriesError):
    """Sequence start requested with an empty item list."""

    title = "No Items"
