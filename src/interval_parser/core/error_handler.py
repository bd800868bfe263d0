"""Error Types for IntervalParser

Exceptions raised by interval extraction, flag validation and configuration.
"""

from enum import Enum
from typing import Optional


class FormatErrorReason(Enum):
    """Which structural expectation an input violated."""
    MISSING_SEPARATOR = "missing_separator"
    MISSING_LEADING = "missing_leading"
    MISSING_INTERVAL = "missing_interval"
    MISSING_TRAILING = "missing_trailing"
    INVALID_INTERVAL = "invalid_interval"


class IntervalParserError(Exception):
    """Base exception class for the interval parser."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidFlagError(IntervalParserError):
    """Error raised when an unsupported mode flag combination is requested."""

    def __init__(self, flags: int, message: Optional[str] = None):
        self.flags = flags
        super().__init__(message or f"You have tried to use an invalid flag combination: {flags}.")


class FormatError(IntervalParserError):
    """Error raised when input does not match the grammar of the active mode."""

    def __init__(self, message: str, reason: FormatErrorReason = FormatErrorReason.INVALID_INTERVAL,
                 text: Optional[str] = None):
        self.reason = reason
        self.text = text
        super().__init__(message)


class ConfigurationError(IntervalParserError):
    """Error raised when configuration is invalid."""
    pass
