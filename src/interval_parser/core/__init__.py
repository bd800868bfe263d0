"""Core modules for IntervalParser.

Configuration, error types and logging shared by the interval processors.
"""

from .config_manager import (
    ConfigManager,
    IntervalParserConfig,
    LoggingConfig,
    ParserSettings,
    SeparationType
)
from .error_handler import (
    ConfigurationError,
    FormatError,
    FormatErrorReason,
    IntervalParserError,
    InvalidFlagError
)
from .logging_manager import LoggingManager

__all__ = [
    "ConfigManager",
    "IntervalParserConfig",
    "LoggingConfig",
    "ParserSettings",
    "SeparationType",
    "ConfigurationError",
    "FormatError",
    "FormatErrorReason",
    "IntervalParserError",
    "InvalidFlagError",
    "LoggingManager"
]
