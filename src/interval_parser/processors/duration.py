"""Duration Description Parser

Converts a textual interval ("9 weeks 8 days 7 hours") into a
``dateutil.relativedelta.relativedelta``.
"""

from collections import defaultdict
from typing import Dict

from dateutil.relativedelta import relativedelta

from ..core.error_handler import FormatError, FormatErrorReason
from .patterns import TIME_PART_PATTERN


def unit_field(unit: str) -> str:
    """Map a unit token to the relativedelta keyword it feeds.

    Bare "m", "min" and "minute(s)" are minutes; "mon" and "month(s)" are months.
    """
    unit = unit.lower()
    if unit.startswith("mon"):
        return "months"

    unit_map = {
        "s": "seconds",
        "m": "minutes",
        "h": "hours",
        "d": "days",
        "w": "weeks",
    }
    return unit_map[unit[0]]


def interval_from_description(description: str) -> relativedelta:
    """Sum the time parts of a description into a calendar duration.

    Args:
        description: Text made of time parts, e.g. "7 months 6 weeks 5 days"

    Returns:
        relativedelta with weeks folded into days

    Raises:
        FormatError: If the description holds no time part
    """
    quantities: Dict[str, int] = defaultdict(int)
    for match in TIME_PART_PATTERN.finditer(description):
        quantities[unit_field(match.group("unit"))] += int(match.group("count"))

    if not quantities:
        raise FormatError(
            f"Could not create an interval from {description!r}.",
            FormatErrorReason.INVALID_INTERVAL,
            description
        )

    return relativedelta(**quantities)
