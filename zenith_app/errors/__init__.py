"""
Error classification system for the wellness application.

This module provides a structured exception hierarchy separating invalid user
input, empty-collection notices, degradable external service failures and
unrecoverable system faults.
"""

from .user_input import (
    UserInputError,
    InvalidDurationError,
    EmptyNameError,
    OutOfRangeError,
    InvalidDateError,
    TextTooShortError,
    UnknownItemError,
    NoEntriesError,
    EmptySequenceError,
)
from .system_failures import (
    SystemFailureError,
    StateTransitionError,
    PersistenceError,
    ConfigurationError,
)
from .recovery import (
    GracefulDegradationError,
    SuggestionUnavailableError,
)

__all__ = [
    # User Input Errors
    "UserInputError",
    "InvalidDurationError",
    "EmptyNameError",
    "OutOfRangeError",
    "InvalidDateError",
    "TextTooShortError",
    "UnknownItemError",
    "NoEntriesError",
    "EmptySequenceError",
    # System Failures
    "SystemFailureError",
    "StateTransitionError",
    "PersistenceError",
    "ConfigurationError",
    # Recovery Categories
    "GracefulDegradationError",
    "SuggestionUnavailableError",
]
