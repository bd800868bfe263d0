"""
Unit tests for mode flag validation.
"""

import pytest

from interval_parser.core.error_handler import InvalidFlagError
from interval_parser.processors.flags import IntervalFlags, validate_flags


class TestValidateFlags:
    """Test suite for flag combination checks"""

    @pytest.mark.unit
    @pytest.mark.parametrize("flags", [
        IntervalFlags.INTERVAL_ONLY,
        IntervalFlags.REQUIRE_TRAILING,
        IntervalFlags.REQUIRE_LEADING,
        IntervalFlags.REQUIRE_LEADING | IntervalFlags.REQUIRE_TRAILING,
        IntervalFlags.MULTIPLE_INTERVALS,
        0, 1, 2, 3, 4,
    ])
    def test_supported_combinations(self, flags):
        assert validate_flags(flags) == flags
        assert isinstance(validate_flags(flags), IntervalFlags)

    @pytest.mark.unit
    @pytest.mark.parametrize("flags", [
        IntervalFlags.MULTIPLE_INTERVALS | IntervalFlags.REQUIRE_TRAILING,
        IntervalFlags.MULTIPLE_INTERVALS | IntervalFlags.REQUIRE_LEADING,
        IntervalFlags.MULTIPLE_INTERVALS | IntervalFlags.REQUIRE_LEADING | IntervalFlags.REQUIRE_TRAILING,
        8,
        9,
        0b10000000,
        -1,
    ])
    def test_unsupported_combinations(self, flags):
        with pytest.raises(InvalidFlagError) as exc_info:
            validate_flags(flags)

        assert exc_info.value.flags == int(flags)

    @pytest.mark.unit
    @pytest.mark.parametrize("flags", ["1", None, 1.0, True])
    def test_non_integer_flags(self, flags):
        with pytest.raises(InvalidFlagError):
            validate_flags(flags)

    @pytest.mark.unit
    def test_flag_values(self):
        assert IntervalFlags.INTERVAL_ONLY == 0
        assert IntervalFlags.REQUIRE_TRAILING == 1
        assert IntervalFlags.REQUIRE_LEADING == 2
        assert IntervalFlags.MULTIPLE_INTERVALS == 4
