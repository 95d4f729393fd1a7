"""
Recovery strategy classifications for error handling.

These errors allow continued operation with reduced functionality: the caller
shows a message and a placeholder instead of the missing content.
"""

from typing import Optional


class GracefulDegradationError(Exception):
    """Mixin for errors that allow continued operation with reduced functionality."""

    def __init__(self, message: str, degraded_functionality: Optional[str] = None,
                 fallback_strategy: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.degraded_functionality = degraded_functionality
        self.fallback_strategy = fallback_strategy
        self.allows_degradation = True


class SuggestionUnavailableError(GracefulDegradationError):
    """External language model call failed or returned unusable output."""

    def __init__(self, message: str, flow: Optional[str] = None,
                 status_code: Optional[int] = None, **kwargs):
        kwargs.setdefault("degraded_functionality", flow)
        kwargs.setdefault("fallback_strategy", "placeholder")
        super().__init__(message, **kwargs)
        self.flow = flow
        self.status_code = status_code
