"""Interval Parser

Simplified entry point: the whole input must be an interval, the result is just
the duration.
"""

from typing import Optional

from dateutil.relativedelta import relativedelta

from ..core.error_handler import FormatError, FormatErrorReason
from .duration import interval_from_description
from .normalizer import Normalizer
from .patterns import INTERVAL_ONLY_PATTERN


class Parser:
    """Parses strings that consist of an interval and nothing else."""

    def __init__(self, normalizer: Optional[Normalizer] = None):
        self.normalizer = normalizer or Normalizer()

    def parse(self, text: str) -> relativedelta:
        """Normalize and validate ``text``, then build the duration.

        Args:
            text: Interval such as "2h30m" or "3 days"

        Returns:
            The duration as relativedelta

        Raises:
            FormatError: If leading or trailing data is present or no interval is found
        """
        normalized = self.normalizer.normalize(text).strip()

        if not INTERVAL_ONLY_PATTERN.match(normalized):
            raise FormatError("Given string is not a valid time interval.",
                              FormatErrorReason.INVALID_INTERVAL, text)

        return interval_from_description(normalized)
