"""IntervalParser - Finds time intervals in free-form text

Extracts expressions such as "9 weeks 5 days", "in 2 hours" or "3d4h bazinga!"
and turns them into durations, optionally with the surrounding text.
"""

__version__ = "0.2.0"
__description__ = "Finds time intervals in free-form text"

from .core import (
    ConfigManager,
    ConfigurationError,
    FormatError,
    FormatErrorReason,
    IntervalParserError,
    InvalidFlagError,
    LoggingManager,
    ParserSettings,
    SeparationType
)
from .processors import (
    IntervalFinder,
    IntervalFlags,
    IntervalParser,
    Normalizer,
    Parser,
    TimeInterval,
    find,
    find_multiple,
    normalize,
    parse
)

__all__ = [
    "ConfigManager",
    "ConfigurationError",
    "FormatError",
    "FormatErrorReason",
    "IntervalParserError",
    "InvalidFlagError",
    "LoggingManager",
    "ParserSettings",
    "SeparationType",
    "IntervalFinder",
    "IntervalFlags",
    "IntervalParser",
    "Normalizer",
    "Parser",
    "TimeInterval",
    "find",
    "find_multiple",
    "normalize",
    "parse"
]
