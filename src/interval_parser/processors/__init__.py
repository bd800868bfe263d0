"""Interval processors.

Grammar, normalization, duration parsing and the interval finder.
"""

from .duration import interval_from_description
from .flags import IntervalFlags, validate_flags
from .interval_finder import IntervalFinder
from .interval_parser import (
    IntervalParser,
    find,
    find_multiple,
    get_default_parser,
    normalize,
    parse
)
from .normalizer import Normalizer
from .parser import Parser
from .time_interval import TimeInterval

__all__ = [
    "interval_from_description",
    "IntervalFlags",
    "validate_flags",
    "IntervalFinder",
    "IntervalParser",
    "find",
    "find_multiple",
    "get_default_parser",
    "normalize",
    "parse",
    "Normalizer",
    "Parser",
    "TimeInterval"
]
