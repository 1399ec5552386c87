"""Centralized Logging Management for toggl-client

Handles log configuration, formatting, and output management.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional


LIBRARY_LOGGER = "toggl_client"


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
    """Centralized logging configuration and management.

    Only the ``toggl_client`` logger hierarchy is configured, so embedding
    applications keep control of the root logger.
    """

    _instance: Optional['LoggingManager'] = None

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.loggers: Dict[str, logging.Logger] = {}
        self.handlers: Dict[str, logging.Handler] = {}
        self._initialized = True

    def configure(
        self,
        level: str = "INFO",
        log_to_console: bool = True,
        file_path: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5
    ) -> logging.Logger:
        """Configure handlers on the library logger.

        Calling this again replaces the handlers installed previously.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_console: Whether to log to stderr with colors
            file_path: Optional path of a rotating log file
            max_bytes: Size at which the log file is rotated
            backup_count: Number of rotated files to keep

        Returns:
            The configured library logger
        """
        numeric_level = self._parse_level(level)
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        library_logger.setLevel(numeric_level)

        for handler in self.handlers.values():
            library_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        if log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            library_logger.addHandler(console_handler)
            self.handlers['console'] = console_handler

        if file_path:
            log_file = Path(file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            library_logger.addHandler(file_handler)
            self.handlers['file'] = file_handler

        return library_logger

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the specified name.

        Args:
            name: Logger name (typically __name__ of the module)

        Returns:
            Logger instance
        """
        manager = cls()
        if name not in manager.loggers:
            manager.loggers[name] = logging.getLogger(name)
        return manager.loggers[name]

    def set_log_level(self, level: str):
        """Set the logging level on the library logger and its console handler."""
        numeric_level = self._parse_level(level)
        logging.getLogger(LIBRARY_LOGGER).setLevel(numeric_level)
        if 'console' in self.handlers:
            self.handlers['console'].setLevel(numeric_level)

    @staticmethod
    def _parse_level(level: str) -> int:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        return numeric_level
