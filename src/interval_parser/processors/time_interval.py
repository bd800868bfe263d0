"""Time Interval Value

Result of a successful find: the duration plus where it was found and the text
around it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True, kw_only=True)
class TimeInterval:
    """Interval found in a string.

    Offsets and lengths are UTF-8 byte counts. The offset refers to the original
    input, the length to the normalized interval text. Context fields the active
    mode did not ask for are None.
    """
    interval: relativedelta
    interval_offset: int = 0
    interval_length: int = 0
    leading_data: Optional[str] = None
    trailing_data: Optional[str] = None

    def __post_init__(self):
        if self.interval_offset < 0 or self.interval_length < 0:
            raise ValueError("Interval offset and length must not be negative")

    def total_seconds(self, reference: Optional[datetime] = None) -> float:
        """Length of the interval in seconds when applied at ``reference``.

        Months have no fixed length, so the result depends on the reference
        datetime (default: now).
        """
        reference = reference or datetime.now()
        return ((reference + self.interval) - reference).total_seconds()

    def as_dict(self) -> Dict[str, Any]:
        interval = self.interval
        return {
            "interval": {
                "years": interval.years,
                "months": interval.months,
                "days": interval.days,
                "hours": interval.hours,
                "minutes": interval.minutes,
                "seconds": interval.seconds,
            },
            "interval_offset": self.interval_offset,
            "interval_length": self.interval_length,
            "leading_data": self.leading_data,
            "trailing_data": self.trailing_data,
        }
