"""
Unit tests for the Normalizer component.

Tests rewriting of abbreviated units into spelled-out ones.
"""

import pytest

from interval_parser.processors.normalizer import Normalizer
from tests.fixtures.sample_data import NORMALIZATION_SAMPLES


class TestNormalizer:
    """Test suite for Normalizer component"""

    @pytest.mark.unit
    @pytest.mark.parametrize("text,expected", NORMALIZATION_SAMPLES)
    def test_normalize(self, normalizer, text, expected):
        """Test abbreviations are spelled out and everything else is kept"""
        assert normalizer.normalize(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", [
        "9w8d7h6m5s",
        "7mon6w5d4h3m2s bazinga!",
        "31d12h30m0s foo",
        "2 hours 30 minutes left",
        "5m  foo 3d",
        "nothing to see",
    ])
    def test_normalize_is_idempotent(self, normalizer, text):
        """Test normalizing already normalized text changes nothing"""
        once = normalizer.normalize(text)
        assert normalizer.normalize(once) == once

    @pytest.mark.unit
    def test_plural_only_when_count_is_not_one(self, normalizer):
        assert normalizer.normalize("1s") == "1 second"
        assert normalizer.normalize("0s") == "0 seconds"
        assert normalizer.normalize("01w") == "01 week"

    @pytest.mark.unit
    def test_adjacent_abbreviations_are_split_by_lookahead(self, normalizer):
        """Test digits of the next time part end the previous abbreviation"""
        assert normalizer.normalize("1h1m1s") == "1 hour 1 minute 1 second"

    @pytest.mark.unit
    def test_bare_m_means_minutes(self, normalizer):
        """Test "m" is minutes while "mon" is months"""
        assert normalizer.normalize("5m") == "5 minutes"
        assert normalizer.normalize("5 m") == "5 minutes"
        assert normalizer.normalize("5mon") == "5 months"
        assert normalizer.normalize("5 months") == "5 months"

    @pytest.mark.unit
    def test_trailing_text_is_kept(self, normalizer):
        assert normalizer.normalize("2h   is plenty") == "2 hours is plenty"

    @pytest.mark.unit
    def test_leading_text_disables_normalization(self, normalizer):
        """Test only a leading run of time parts is rewritten"""
        assert normalizer.normalize("wait 2h then 3d") == "wait 2h then 3d"

    @pytest.mark.unit
    def test_more_than_five_digits_is_left_alone(self, normalizer):
        assert normalizer.normalize("123456s") == "123456s"

    @pytest.mark.unit
    def test_pattern_is_shared_between_instances(self):
        assert Normalizer().pattern is Normalizer.pattern
