"""Time String Normalizer

Rewrites short duration abbreviations ("5m", "2h", "7mon") into spelled-out
units ("5 minutes ", "2 hours ", "7 months ") so the interval grammar and the
duration parser only ever see full words.
"""

import re

from ..core.logging_manager import LoggingManager


UNIT_WORDS = {
    "s": "second",
    "m": "minute",
    "h": "hour",
    "d": "day",
    "w": "week",
    "mon": "month",
}


class Normalizer:
    """Turns abbreviated time strings into spelled-out ones.

    Only a leading run of time parts is rewritten. From the first position that
    does not start a time part, the rest of the line is passed through stripped,
    so trailing data survives but leading data is never normalized.
    """

    pattern = re.compile(r"""
        # integer part of a time string
        \s? (?P<int> \d{1,5}) \s?
        # only the shortest abbreviation is matched, the lookahead accepts its spelled-out forms
        (?P<time>
          (?: s (?=(?:ec(?:ond)?s?)?(?:\b|\d))
            | m (?=(?:in(?:ute)?s?)?(?:\b|\d))
            | h (?=(?:(?:ou)?rs?)?(?:\b|\d))
            | d (?=(?:ays?)?(?:\b|\d))
            | w (?=(?:eeks?)?(?:\b|\d))
            | mon (?=(?:(?:th)?s?)?(?:\b|\d))
          )
        )
        [^\d]*?(?=\b|\d)
        # anything else ends the run of time parts
        | (?P<text> .+)
    """, re.IGNORECASE | re.VERBOSE | re.ASCII)

    def __init__(self):
        self.logger = LoggingManager.get_logger(__name__)

    def normalize(self, text: str) -> str:
        """Spell out abbreviated units, keeping any trailing text.

        Args:
            text: Raw input such as "9w8d7h6m5s bazinga!"

        Returns:
            Normalized text such as "9 weeks 8 days 7 hours 6 minutes 5 seconds bazinga!"
        """
        output = self.pattern.sub(self._rewrite, text).strip()
        if output != text:
            self.logger.debug(f"Normalized {text!r} to {output!r}")
        return output

    @staticmethod
    def _rewrite(match: re.Match) -> str:
        passthrough = match.group("text")
        if passthrough is not None:
            return passthrough.strip()

        count = match.group("int")
        unit = UNIT_WORDS[match.group("time").lower()]
        if int(count) != 1:
            unit += "s"

        return f"{count} {unit} "
