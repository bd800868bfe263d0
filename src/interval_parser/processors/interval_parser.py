"""Interval Parser Facade

Bundles settings, normalizer, finder and parser behind one object, plus
module-level shortcuts using default settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from dateutil.relativedelta import relativedelta

from ..core.config_manager import ConfigManager, ParserSettings
from ..core.logging_manager import LoggingManager
from .flags import IntervalFlags
from .interval_finder import IntervalFinder
from .normalizer import Normalizer
from .parser import Parser
from .time_interval import TimeInterval


class IntervalParser:
    """Main entry point for finding and parsing intervals."""

    def __init__(self, settings: Optional[ParserSettings] = None):
        """Initialize interval parser.

        Args:
            settings: Separators and flags, defaults to ParserSettings()
        """
        self.settings = settings or ParserSettings()
        self.normalizer = Normalizer()
        self.finder = IntervalFinder(self.settings, self.normalizer)
        self.parser = Parser(self.normalizer)

    @classmethod
    def from_config(cls, config_path: Optional[Union[str, Path]] = None,
                    configure_logging: bool = True) -> 'IntervalParser':
        """Build a parser from a YAML file and environment overrides.

        Args:
            config_path: Optional YAML configuration file
            configure_logging: Apply the logging section of the configuration

        Returns:
            Parser using the configured settings
        """
        config = ConfigManager(config_path).load_config()

        if configure_logging:
            LoggingManager.configure(
                level=config.logging.level,
                log_file=config.logging.file_path,
                log_to_console=config.logging.log_to_console,
                max_bytes=config.logging.max_file_size_bytes,
                backup_count=config.logging.backup_count
            )

        return cls(config.parser)

    def find(self, text: str, flags: int = IntervalFlags.INTERVAL_ONLY
             ) -> Union[TimeInterval, List[TimeInterval]]:
        return self.finder.find(text, flags)

    def find_multiple(self, text: str) -> List[TimeInterval]:
        return self.finder.find_multiple(text)

    def parse(self, text: str) -> relativedelta:
        return self.parser.parse(text)

    def normalize(self, text: str) -> str:
        return self.normalizer.normalize(text)


@lru_cache(maxsize=1)
def get_default_parser() -> IntervalParser:
    return IntervalParser()


def find(text: str, flags: int = IntervalFlags.INTERVAL_ONLY
         ) -> Union[TimeInterval, List[TimeInterval]]:
    """Find an interval using default settings."""
    return get_default_parser().find(text, flags)


def find_multiple(text: str) -> List[TimeInterval]:
    """Find every interval of a comma separated list using default settings."""
    return get_default_parser().find_multiple(text)


def parse(text: str) -> relativedelta:
    """Parse a bare interval using default settings."""
    return get_default_parser().parse(text)


def normalize(text: str) -> str:
    """Spell out abbreviated units."""
    return get_default_parser().normalize(text)
