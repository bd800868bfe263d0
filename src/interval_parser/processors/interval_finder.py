"""Interval Finder

Finds intervals inside strings, optionally together with the text leading up
to them ("foo in 2h") and the text following them ("2h bar").
"""

from typing import Iterator, List, Optional, Tuple, Union

from ..core.config_manager import ParserSettings
from ..core.error_handler import FormatError, FormatErrorReason
from ..core.logging_manager import LoggingManager
from .duration import interval_from_description
from .flags import IntervalFlags, validate_flags
from .normalizer import Normalizer
from .patterns import (
    INTERVAL_ONLY_PATTERN,
    INTERVAL_WITH_TRAILING_PATTERN,
    derive_multiple_interval_pattern,
    derive_separator_pattern,
    find_last_leading_separator,
)
from .time_interval import TimeInterval


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


class IntervalFinder:
    """Looks for a valid interval along with leading and/or trailing data."""

    def __init__(self, settings: Optional[ParserSettings] = None,
                 normalizer: Optional[Normalizer] = None):
        """Initialize interval finder.

        Args:
            settings: Separators and flags, defaults to ParserSettings()
            normalizer: Normalizer used before structural matching
        """
        self.settings = settings or ParserSettings()
        self.normalizer = normalizer or Normalizer()
        self.logger = LoggingManager.get_logger(__name__)

    def find(self, text: str, flags: int = IntervalFlags.INTERVAL_ONLY
             ) -> Union[TimeInterval, List[TimeInterval]]:
        """Find an interval in ``text`` according to ``flags``.

        Args:
            text: Input string
            flags: IntervalFlags combination selecting the mode

        Returns:
            A TimeInterval, or a list of them for MULTIPLE_INTERVALS

        Raises:
            InvalidFlagError: If the flag combination is not supported
            FormatError: If the input does not fit the requested mode
        """
        mode = validate_flags(flags)
        self.logger.debug(f"Finding interval in {text!r} with flags {mode!r}")

        if mode == IntervalFlags.MULTIPLE_INTERVALS:
            return self.find_multiple(text)

        if mode == IntervalFlags.REQUIRE_LEADING | IntervalFlags.REQUIRE_TRAILING:
            return self._find_with_leading_and_trailing(text)

        if mode == IntervalFlags.REQUIRE_LEADING:
            return self._find_with_leading(text)

        if mode == IntervalFlags.REQUIRE_TRAILING:
            return self._find_with_trailing(text)

        return self._find_interval_only(text)

    def find_multiple(self, text: str) -> List[TimeInterval]:
        """Find every interval in a separated list such as "2h, foo in 3d bar".

        Segments without a usable interval are skipped, so the result may be
        empty; no FormatError is raised. A segment that starts with the
        leading separator ("in 2h") reports the separator as leading data.
        """
        results = []
        for segment, segment_offset in self._split_segments(text):
            time_interval = self._find_in_segment(segment, byte_length(text[:segment_offset]))
            if time_interval is None:
                self.logger.debug(f"Skipping segment without a valid interval: {segment!r}")
                continue
            results.append(time_interval)

        self.logger.debug(f"Found {len(results)} interval(s) in {text!r}")
        return results

    def _find_interval_only(self, text: str) -> TimeInterval:
        normalized = self.normalizer.normalize(text)

        if not INTERVAL_ONLY_PATTERN.match(normalized):
            raise FormatError("Given input is not a valid interval.",
                              FormatErrorReason.INVALID_INTERVAL, text)

        return TimeInterval(
            interval=interval_from_description(normalized),
            interval_offset=0,
            interval_length=byte_length(normalized),
        )

    def _find_with_leading(self, text: str) -> TimeInterval:
        leading_data, remainder, interval_offset = self._split_leading(text)

        # trailing data is not allowed here, so the whole remainder must be the interval
        normalized = self.normalizer.normalize(remainder)
        parts = INTERVAL_ONLY_PATTERN.match(normalized)
        if not parts:
            raise FormatError(
                "Given input does not contain a valid interval. "
                "Keep in mind trailing data is not allowed with current flag.",
                FormatErrorReason.INVALID_INTERVAL,
                text
            )

        interval = parts.group("interval")
        return TimeInterval(
            interval=interval_from_description(interval),
            interval_offset=interval_offset,
            interval_length=byte_length(interval),
            leading_data=leading_data,
        )

    def _find_with_trailing(self, text: str) -> TimeInterval:
        normalized = self.normalizer.normalize(text)

        parts = INTERVAL_WITH_TRAILING_PATTERN.match(normalized)
        if not parts:
            raise FormatError(
                "Given input does not contain a valid interval. "
                "Keep in mind leading data is not allowed with current flag.",
                FormatErrorReason.MISSING_INTERVAL,
                text
            )

        interval = parts.group("interval")
        trailing_data = parts.group("trailing")
        if not trailing_data:
            raise FormatError("Could not find any valid trailing data.",
                              FormatErrorReason.MISSING_TRAILING, text)

        return TimeInterval(
            interval=interval_from_description(interval),
            interval_offset=0,
            interval_length=byte_length(interval),
            trailing_data=trailing_data,
        )

    def _find_with_leading_and_trailing(self, text: str) -> TimeInterval:
        leading_data, remainder, interval_offset = self._split_leading(text)

        normalized = self.normalizer.normalize(remainder)
        parts = INTERVAL_WITH_TRAILING_PATTERN.match(normalized)
        if not parts:
            raise FormatError("Given input does not contain a valid interval and/or trailing data.",
                              FormatErrorReason.MISSING_INTERVAL, text)

        interval = parts.group("interval")
        return TimeInterval(
            interval=interval_from_description(interval),
            interval_offset=interval_offset,
            interval_length=byte_length(interval),
            leading_data=leading_data,
            trailing_data=parts.group("trailing"),
        )

    def _split_leading(self, text: str) -> Tuple[str, str, int]:
        """Split ``text`` at the last leading separator.

        Returns:
            Leading data, the remainder after the separator and the byte offset
            of the remainder within ``text``
        """
        match = find_last_leading_separator(self.settings, text)
        if not match:
            raise FormatError(
                "Allowing leading data requires using a separator. "
                f"Ie. foo {self.settings.leading_separator} <interval>",
                FormatErrorReason.MISSING_SEPARATOR,
                text
            )

        leading_data = text[:match.start()]
        remainder = text[match.end():]

        if not leading_data:
            raise FormatError("Given input does not contain valid leading data.",
                              FormatErrorReason.MISSING_LEADING, text)
        if not remainder:
            raise FormatError("Given input does not contain a valid interval.",
                              FormatErrorReason.MISSING_INTERVAL, text)

        if self.settings.keep_leading_separator:
            leading_data += match.group("separator").rstrip()

        return leading_data, remainder, byte_length(text[:match.end()])

    def _split_segments(self, text: str) -> Iterator[Tuple[str, int]]:
        """Yield each separated segment with its character offset in ``text``."""
        pattern = derive_separator_pattern(self.settings)
        position = 0
        remaining = text

        while True:
            match = pattern.match(remaining)
            if not match:
                break
            yield from self._stripped_segment(match.group("first"), position)
            position += match.start("next")
            remaining = match.group("next")

        yield from self._stripped_segment(remaining, position)

    @staticmethod
    def _stripped_segment(segment: str, position: int) -> Iterator[Tuple[str, int]]:
        stripped = segment.strip()
        if stripped:
            yield stripped, position + len(segment) - len(segment.lstrip())

    def _find_in_segment(self, segment: str, segment_byte_offset: int) -> Optional[TimeInterval]:
        pattern = derive_multiple_interval_pattern(self.settings)
        match = pattern.match(segment)
        if not match:
            return None

        leading_data = match.group("leading")
        separator = match.group("separator")
        if separator and not leading_data:
            # a bare "in 2h" segment reports the separator as its leading data
            leading_data = separator.strip()
        elif separator and self.settings.keep_leading_separator:
            leading_data += separator.rstrip()

        raw_interval = match.group("interval")
        interval_start = match.start("interval") + len(raw_interval) - len(raw_interval.lstrip())

        normalized = self.normalizer.normalize(raw_interval + match.group("trailing"))
        parts = INTERVAL_WITH_TRAILING_PATTERN.match(normalized)
        if not parts:
            return None

        interval = parts.group("interval")
        return TimeInterval(
            interval=interval_from_description(interval),
            interval_offset=segment_byte_offset + byte_length(segment[:interval_start]),
            interval_length=byte_length(interval),
            leading_data=leading_data,
            trailing_data=parts.group("trailing"),
        )
