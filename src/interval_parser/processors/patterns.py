"""Interval Grammar

Regular expressions describing a "time part" (an integer followed by a unit)
and an "interval" (one or more time parts). The time part is defined once and
composed into every top-level pattern, including the ones derived from
``ParserSettings``.
"""

import re
from functools import lru_cache
from typing import Optional

from ..core.config_manager import ParserSettings, SeparationType


GRAMMAR_FLAGS = re.IGNORECASE | re.VERBOSE | re.ASCII

# Whitespace before a time part, only consumed from the start of a whitespace run
LEADING_SPACE = r"(?:(?<!\s)\s*+\b)?"

# 1 to 5 digits, optionally preceded by whitespace at a word boundary
INTEGER = rf"{LEADING_SPACE}\d{{1,5}}\s*"

# Bare "m" is minutes, months need at least "mon"
UNIT = r"""
    (?: s(?:ec(?:ond)?s?)?
      | m(?:on(?:ths?)?|in(?:ute)?s?)?
      | h(?:rs?|ours?)?
      | d(?:ays?)?
      | w(?:eeks?)?
    )
"""


def time_part(capture: bool = False) -> str:
    """Build the time part sub-pattern.

    Args:
        capture: Expose the integer and unit as ``count`` and ``unit`` groups

    Returns:
        Pattern text to be compiled with ``GRAMMAR_FLAGS``
    """
    if capture:
        return rf"{LEADING_SPACE}(?P<count>\d{{1,5}})\s*(?P<unit>{UNIT})"
    return rf"(?:{INTEGER}{UNIT})"


def interval(name: str = "interval") -> str:
    """Possessive run of time parts, captured under ``name``."""
    return rf"(?P<{name}>(?:{time_part()})++)"


INTERVAL_ONLY_PATTERN = re.compile(rf"^{interval()}$", GRAMMAR_FLAGS)

# trailing data may span lines
INTERVAL_WITH_TRAILING_PATTERN = re.compile(
    rf"^{interval()}(?P<trailing>.*)$",
    GRAMMAR_FLAGS | re.DOTALL
)

TIME_PART_PATTERN = re.compile(time_part(capture=True), GRAMMAR_FLAGS)


@lru_cache(maxsize=32)
def derive_leading_pattern(settings: ParserSettings) -> re.Pattern:
    """Leading separator surrounded by whitespace, e.g. `` in ``.

    Matching is only attempted where a whitespace run starts and the run is
    taken possessively, so searching stays linear on long blank stretches.
    """
    separator = re.escape(settings.leading_separator)
    return re.compile(
        rf"(?<!\s)(?P<separator>\s++(?:{separator})\s++)",
        re.IGNORECASE
    )


def find_last_leading_separator(settings: ParserSettings, text: str) -> Optional[re.Match]:
    """Return the last leading separator in ``text``, or None.

    Consecutive matches may share whitespace ("log in in 5m"), so the search
    resumes one character after the previous match start.
    """
    pattern = derive_leading_pattern(settings)
    last = None
    match = pattern.search(text)
    while match:
        last = match
        match = pattern.search(text, match.start() + 1)
    return last


@lru_cache(maxsize=32)
def derive_symbol_separator_pattern(settings: ParserSettings) -> re.Pattern:
    symbol = re.escape(settings.symbol_separator)
    return re.compile(
        rf"(?P<first>[^{symbol}]*)\s?{symbol}\s?(?P<next>.*)$",
        re.IGNORECASE | re.DOTALL
    )


@lru_cache(maxsize=32)
def derive_word_separator_pattern(settings: ParserSettings) -> re.Pattern:
    word = re.escape(settings.word_separator)
    return re.compile(
        rf"^(?P<first>.*?)\s?\b{word}\b\s?(?P<next>.*)$",
        re.IGNORECASE | re.DOTALL
    )


def derive_separator_pattern(settings: ParserSettings) -> re.Pattern:
    """Pattern splitting multiple intervals, per the configured separation type."""
    if settings.separation_type is SeparationType.WORD:
        return derive_word_separator_pattern(settings)
    return derive_symbol_separator_pattern(settings)


@lru_cache(maxsize=32)
def derive_multiple_interval_pattern(settings: ParserSettings) -> re.Pattern:
    """Recognize one segment: optional leading text and separator, interval, trailing."""
    separator = re.escape(settings.leading_separator)
    return re.compile(
        rf"""
        ^(?P<leading>.*?)
         (?P<separator>(?<!\s)\s*+\b(?:{separator})\b\s*)?
         {interval()}
         (?P<trailing>.*)$
        """,
        GRAMMAR_FLAGS | re.DOTALL
    )
