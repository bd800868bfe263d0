"""Configuration Management for IntervalParser

Holds the parser settings (separators and flags) and the logging configuration.
Configuration can be built in code or loaded from a YAML file with environment
variable overrides.
"""

import os
import re
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .error_handler import ConfigurationError
from .logging_manager import LoggingManager


class SeparationType(str, Enum):
    """How multiple intervals are separated within one input."""
    SYMBOL = "symbol"
    WORD = "word"


class ParserSettings(BaseModel):
    """Separators and flags used by the interval finder.

    Settings are frozen once built; patterns derived from them are cached per
    instance and never go stale.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    leading_separator: str = Field(default="in", min_length=1)
    keep_leading_separator: bool = Field(default=False)
    separation_type: SeparationType = Field(default=SeparationType.SYMBOL)
    symbol_separator: str = Field(default=",", min_length=1)
    word_separator: str = Field(default="word", min_length=1)

    @field_validator("leading_separator", "symbol_separator", "word_separator")
    @classmethod
    def validate_separator(cls, v):
        """Separators are literals and cannot be blank"""
        v = v.strip()
        if not v:
            raise ValueError("Separator must contain at least one non-whitespace character")
        return v

    @property
    def multiple_separator(self) -> str:
        """Literal used to split multiple intervals."""
        if self.separation_type is SeparationType.WORD:
            return self.word_separator
        return self.symbol_separator


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=True)
    file_path: Optional[str] = Field(default=None)
    max_file_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=1, le=20)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("max_file_size")
    @classmethod
    def validate_file_size(cls, v):
        """Validate file size format"""
        if not re.match(r'^\d+[KMG]B$', v.upper()):
            raise ValueError("File size must be in format: 10KB, 10MB, or 1GB")
        return v.upper()

    @property
    def max_file_size_bytes(self) -> int:
        multipliers = {"K": 1024, "M": 1024 ** 2, "G": 1024 ** 3}
        return int(self.max_file_size[:-2]) * multipliers[self.max_file_size[-2]]


class IntervalParserConfig(BaseModel):
    """Complete configuration of an interval parser session."""
    parser: ParserSettings = Field(default_factory=ParserSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Loads configuration from YAML with environment overrides.

    Environment variables follow the pattern ``<PREFIX><SECTION>__<KEY>``, e.g.
    ``INTERVAL_PARSER_PARSER__LEADING_SEPARATOR=within`` sets
    ``parser.leading_separator``. Values are passed to pydantic as strings.
    """

    ENV_PREFIX = "INTERVAL_PARSER_"

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 env_prefix: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to a YAML configuration file
            env_prefix: Prefix of environment variables holding overrides
        """
        self.config_path = Path(config_path) if config_path else None
        self.env_prefix = env_prefix if env_prefix is not None else self.ENV_PREFIX
        self._config: Optional[IntervalParserConfig] = None
        self._lock = threading.RLock()
        self.logger = LoggingManager.get_logger(__name__)

    def load_config(self) -> IntervalParserConfig:
        """Load and validate configuration.

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If the file is unreadable or validation fails
        """
        with self._lock:
            if self._config:
                return self._config

            config_data: Dict[str, Any] = {}
            if self.config_path is not None:
                self.logger.info(f"Loading config from {self.config_path}")
                self._deep_merge(config_data, self._load_yaml_file(self.config_path))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {sorted(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            try:
                self._config = IntervalParserConfig(**config_data)
            except ValidationError as e:
                self.logger.error(f"Configuration validation failed: {e}")
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def get_parser_settings(self) -> ParserSettings:
        return self.load_config().parser

    def get_logging_config(self) -> LoggingConfig:
        return self.load_config().logging

    def reload_config(self) -> IntervalParserConfig:
        """Reload configuration, keeping the previous one if loading fails."""
        self.logger.info("Reloading configuration...")

        with self._lock:
            old_config = self._config
            self._config = None

            try:
                return self.load_config()
            except ConfigurationError:
                self._config = old_config
                raise

    def save_config(self, file_path: Optional[Union[str, Path]] = None) -> Path:
        """Write the current configuration as YAML.

        Args:
            file_path: Target file, defaults to the path the config was loaded from

        Returns:
            Path that was written
        """
        target = Path(file_path) if file_path else self.config_path
        if target is None:
            raise ConfigurationError("No file path given to save configuration to")

        config_dict = self.load_config().model_dump(mode="json")
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, 'w') as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)

        self.logger.info(f"Saved configuration to {target}")
        return target

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        if not file_path.exists():
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {file_path} must be a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables."""
        overrides: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self.env_prefix):
                continue

            section, sep, field = key[len(self.env_prefix):].lower().partition("__")
            if not sep or not section or not field:
                continue

            overrides.setdefault(section, {})[field] = value

        return overrides

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
