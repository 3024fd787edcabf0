"""Custom exceptions for diff highlighting."""

from typing import Any


_CONTEXT_KEYS = ('line', 'segment', 'side')


class DiffHighlightError(Exception):
    """Base exception for diff highlighting."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details

    def __str__(self) -> str:
        """Message followed by the offending line, segment and side, when known."""
        message = super().__str__()
        if not self.error_details:
            return message

        context = [
            f"{key}={self.error_details[key]!r}"
            for key in _CONTEXT_KEYS
            if key in self.error_details
        ]
        if not context:
            return message

        return f"{message} ({', '.join(context)})"


class MalformedBlockError(DiffHighlightError):
    """Raised when a buffered pair-block line does not start with '+' or '-'."""


class SegmentNotFoundError(DiffHighlightError):
    """Raised when a diff segment cannot be located in the rendered block text."""


class HighlightConfigError(DiffHighlightError):
    """Raised when the highlighter configuration is invalid."""


class StreamBrokenError(DiffHighlightError):
    """Raised when reading from a stream that already failed."""
