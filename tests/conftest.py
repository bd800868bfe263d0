"""
Pytest configuration and shared fixtures for IntervalParser testing.
"""

import pytest

from interval_parser.core.config_manager import ParserSettings
from interval_parser.core.logging_manager import LoggingManager
from interval_parser.processors.interval_finder import IntervalFinder
from interval_parser.processors.interval_parser import IntervalParser
from interval_parser.processors.normalizer import Normalizer
from interval_parser.processors.parser import Parser


@pytest.fixture
def settings():
    """Default parser settings"""
    return ParserSettings()


@pytest.fixture
def normalizer():
    return Normalizer()


@pytest.fixture
def interval_finder(settings, normalizer):
    """IntervalFinder with default settings"""
    return IntervalFinder(settings, normalizer)


@pytest.fixture
def parser(normalizer):
    return Parser(normalizer)


@pytest.fixture
def interval_parser(settings):
    return IntervalParser(settings)


@pytest.fixture
def reset_logging():
    """Detach handlers added during a test"""
    yield LoggingManager()
    LoggingManager().reset()
