"""Extraction mode flags."""

from enum import IntFlag

from ..core.error_handler import InvalidFlagError


class IntervalFlags(IntFlag):
    """Modes of the interval finder.

    REQUIRE_LEADING and REQUIRE_TRAILING can be combined; MULTIPLE_INTERVALS
    stands alone.
    """
    INTERVAL_ONLY = 0b000
    REQUIRE_TRAILING = 0b001
    REQUIRE_LEADING = 0b010
    MULTIPLE_INTERVALS = 0b100


KNOWN_FLAGS = (
    IntervalFlags.REQUIRE_TRAILING
    | IntervalFlags.REQUIRE_LEADING
    | IntervalFlags.MULTIPLE_INTERVALS
)


def validate_flags(flags: int) -> IntervalFlags:
    """Check a flag combination before any matching happens.

    Args:
        flags: Requested mode, an IntervalFlags member or plain int

    Returns:
        The flags as IntervalFlags

    Raises:
        InvalidFlagError: For unknown bits or MULTIPLE_INTERVALS combined with another flag
    """
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise InvalidFlagError(flags, f"Flags must be an integer, got {type(flags).__name__}.")

    value = int(flags)
    if value < 0 or value & ~int(KNOWN_FLAGS):
        raise InvalidFlagError(value)

    if value & IntervalFlags.MULTIPLE_INTERVALS and value != IntervalFlags.MULTIPLE_INTERVALS:
        raise InvalidFlagError(value, "MULTIPLE_INTERVALS cannot be combined with other flags.")

    return IntervalFlags(value)
