"""Global Error Handling for toggl-client

Base exception hierarchy and the error handler used by command-line consumers
to log failures and turn them into user-facing summaries.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TogglError(Exception):
    """Base exception class for toggl-client."""

    severity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, severity: Optional[ErrorSeverity] = None):
        self.message = message
        if severity is not None:
            self.severity = severity
        super().__init__(self.message)


class ConfigurationError(TogglError):
    """Error raised when configuration is invalid."""
    severity = ErrorSeverity.HIGH


class ErrorHandler:
    """Logs errors and produces user-facing summaries."""

    # Suggested actions keyed by exception class name, checked along the MRO
    USER_ACTIONS = {
        'DuplicateResourceError': 'Each resource name can only be registered once',
        'UnknownResourceError': 'Register the resource before requesting it',
        'RequestBuildError': 'Check the endpoint URL and request payload',
        'TransportError': 'Check your network connection and try again',
        'DecodeError': 'The service returned an unexpected response body',
        'APIError': 'The Toggl API rejected the request',
        'ConfigurationError': 'Check your configuration files and environment',
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize error handler.

        Args:
            logger: Logger to report errors to, defaults to this module's logger
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_callbacks: Dict[Type[Exception], Callable[[Exception], None]] = {}

    def register_error_callback(self, exception_type: Type[Exception],
                                callback: Callable[[Exception], None]):
        """Register a callback for specific exception types.

        Args:
            exception_type: The exception type to handle
            callback: Function to call when this exception occurs
        """
        self.error_callbacks[exception_type] = callback

    def handle_error(self, error: Exception, context: Optional[str] = None) -> ErrorSeverity:
        """Log an error at a level matching its severity and run callbacks.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            The severity the error was handled with
        """
        severity = self.get_error_severity(error)
        message = self._format_error_message(error, context)
        self._log_error(message, severity)

        for exception_type, callback in self.error_callbacks.items():
            if isinstance(error, exception_type):
                callback(error)

        return severity

    def get_error_severity(self, error: Exception) -> ErrorSeverity:
        """Determine error severity based on exception type."""
        if isinstance(error, TogglError):
            return error.severity

        severity_map = {
            FileNotFoundError: ErrorSeverity.MEDIUM,
            PermissionError: ErrorSeverity.HIGH,
            ConnectionError: ErrorSeverity.HIGH,
            TimeoutError: ErrorSeverity.MEDIUM,
            MemoryError: ErrorSeverity.CRITICAL,
            KeyboardInterrupt: ErrorSeverity.LOW,
        }
        return severity_map.get(type(error), ErrorSeverity.MEDIUM)

    def summarize(self, error: Exception) -> Dict[str, Any]:
        """Get a formatted error summary for user display"""
        summary = {
            'error_type': type(error).__name__,
            'message': str(error),
            'severity': self.get_error_severity(error).value,
            'timestamp': datetime.now().isoformat(),
        }

        code = getattr(error, 'code', None)
        if code is not None:
            summary['code'] = code

        summary['user_action'] = 'An error occurred. Please try again'
        for klass in type(error).__mro__:
            if klass.__name__ in self.USER_ACTIONS:
                summary['user_action'] = self.USER_ACTIONS[klass.__name__]
                break

        return summary

    def _format_error_message(self, error: Exception, context: Optional[str] = None) -> str:
        message = f"{type(error).__name__}: {error}"
        if context:
            message = f"{context}: {message}"
        return message

    def _log_error(self, message: str, severity: ErrorSeverity):
        log_methods = {
            ErrorSeverity.LOW: self.logger.info,
            ErrorSeverity.MEDIUM: self.logger.warning,
            ErrorSeverity.HIGH: self.logger.error,
            ErrorSeverity.CRITICAL: self.logger.critical,
        }
        log_methods[severity](message)
