"""Centralized Logging Management for IntervalParser

Hands out loggers under the package namespace and configures their output.
Nothing is emitted until an application calls ``LoggingManager.configure``.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, Union


PACKAGE_LOGGER = "interval_parser"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logging manager (only once)."""
        if self._initialized:
            return

        self.loggers: Dict[str, logging.Logger] = {}
        self.handlers: Dict[str, logging.Handler] = {}
        self._setup_package_logger()
        self._initialized = True

    def _setup_package_logger(self):
        """Attach a NullHandler so library logging stays silent by default."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
            package_logger.addHandler(logging.NullHandler())

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Class method to get logger instance.

        Args:
            name: Logger name (typically __name__ of the module)

        Returns:
            Logger living under the package namespace
        """
        manager = cls()
        return manager._get_logger_instance(name)

    def _get_logger_instance(self, name: str) -> logging.Logger:
        """Internal method to get logger instance."""
        if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
            name = f"{PACKAGE_LOGGER}.{name}"

        if name in self.loggers:
            return self.loggers[name]

        logger = logging.getLogger(name)
        self.loggers[name] = logger
        return logger

    @classmethod
    def configure(cls, level: str = "INFO", log_file: Optional[Union[str, Path]] = None,
                  log_to_console: bool = True, max_bytes: int = 10 * 1024 * 1024,
                  backup_count: int = 5) -> logging.Logger:
        """Configure console and file output for the package logger.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional path of a rotating log file
            log_to_console: Whether to log to stdout with colors
            max_bytes: Rotation size of the log file
            backup_count: Number of rotated files to keep

        Returns:
            The configured package logger
        """
        manager = cls()
        numeric_level = manager._resolve_level(level)

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(numeric_level)
        manager._remove_managed_handlers()

        if log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            manager._add_managed_handler("console", console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            manager._add_managed_handler("file", file_handler)

        return package_logger

    def set_log_level(self, level: str):
        """Set the logging level of the package logger and its console handler.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = self._resolve_level(level)
        logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

        console_handler = self.handlers.get("console")
        if console_handler is not None:
            console_handler.setLevel(numeric_level)

    def reset(self):
        """Detach every handler added by ``configure``."""
        self._remove_managed_handlers()
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)

    @staticmethod
    def _resolve_level(level: str) -> int:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        return numeric_level

    def _add_managed_handler(self, key: str, handler: logging.Handler):
        logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
        self.handlers[key] = handler

    def _remove_managed_handlers(self):
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in self.handlers.values():
            package_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()
