"""Core modules for toggl-client.

Error types, logging setup and configuration loading shared by the API
package and the command line.
"""

from .error_handler import (
    TogglError,
    ConfigurationError,
    ErrorHandler,
    ErrorSeverity
)
from .logging_manager import LoggingManager
from .config_manager import AppConfig, APIConfig, LoggingConfig, ConfigManager

__all__ = [
    "TogglError",
    "ConfigurationError",
    "ErrorHandler",
    "ErrorSeverity",
    "LoggingManager",
    "AppConfig",
    "APIConfig",
    "LoggingConfig",
    "ConfigManager"
]
