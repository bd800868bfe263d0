"""
Unit tests for the Parser component and the IntervalParser facade.
"""

import pytest
from dateutil.relativedelta import relativedelta

from interval_parser.core.config_manager import ParserSettings
from interval_parser.core.error_handler import FormatError, FormatErrorReason
from interval_parser.processors import interval_parser as facade
from interval_parser.processors.flags import IntervalFlags
from interval_parser.processors.interval_parser import IntervalParser
from tests.fixtures.sample_data import INTERVAL_ONLY_SAMPLES, INVALID_INTERVALS


class TestParser:
    """Test suite for Parser"""

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", [
        ("2h30m", relativedelta(hours=2, minutes=30)),
        ("  3 days  ", relativedelta(days=3)),
        ("1w", relativedelta(days=7)),
        ("7mon", relativedelta(months=7)),
        ("90s", relativedelta(minutes=1, seconds=30)),
    ])
    def test_parse(self, parser, text, expected):
        assert parser.parse(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", INVALID_INTERVALS)
    def test_parse_rejects_non_intervals(self, parser, text):
        with pytest.raises(FormatError) as exc_info:
            parser.parse(text)

        assert exc_info.value.reason is FormatErrorReason.INVALID_INTERVAL
        assert exc_info.value.text == text

    @pytest.mark.unit
    def test_bare_m_is_minutes_not_months(self, parser):
        """Test the documented resolution of the m/mon ambiguity"""
        assert parser.parse("5m") == relativedelta(minutes=5)
        assert parser.parse("5 m") == relativedelta(minutes=5)
        assert parser.parse("5mon") == relativedelta(months=5)
        assert parser.parse("5 months") == relativedelta(months=5)

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", INTERVAL_ONLY_SAMPLES)
    def test_parse_agrees_with_find(self, parser, interval_finder, text, expected):
        assert parser.parse(text) == interval_finder.find(text, IntervalFlags.INTERVAL_ONLY).interval


class TestIntervalParser:
    """Test suite for the IntervalParser facade"""

    @pytest.mark.unit
    def test_components_share_settings_and_normalizer(self, interval_parser, settings):
        assert interval_parser.settings is settings
        assert interval_parser.finder.settings is settings
        assert interval_parser.finder.normalizer is interval_parser.normalizer
        assert interval_parser.parser.normalizer is interval_parser.normalizer

    @pytest.mark.unit
    def test_default_settings(self):
        assert IntervalParser().settings == ParserSettings()

    @pytest.mark.unit
    def test_delegates(self, interval_parser):
        assert interval_parser.normalize("3d4h") == "3 days 4 hours"
        assert interval_parser.parse("3d4h") == relativedelta(days=3, hours=4)
        assert interval_parser.find("foo in 3d", IntervalFlags.REQUIRE_LEADING).leading_data == "foo"
        assert len(interval_parser.find_multiple("1h, 2h")) == 2

    @pytest.mark.unit
    def test_module_level_shortcuts(self):
        assert facade.normalize("5m") == "5 minutes"
        assert facade.parse("5m") == relativedelta(minutes=5)
        assert facade.find("5m bar", IntervalFlags.REQUIRE_TRAILING).trailing_data == " bar"
        assert [r.interval for r in facade.find_multiple("1h, 2d")] == [
            relativedelta(hours=1),
            relativedelta(days=2),
        ]
        assert facade.get_default_parser() is facade.get_default_parser()
