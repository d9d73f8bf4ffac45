"""
Centralized error handling for fieldcheck

Rule failures are returned as values (see ``fieldcheck.rules.RuleError``).
The exceptions defined here are raised only at the edges: when a caller asks
for aggregated field errors to be raised, or when the library is configured
or wired incorrectly.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover
    from fieldcheck.utilities.logging_patterns import StructuredLogger

_logger: Optional["StructuredLogger"] = None


def _get_logger() -> "StructuredLogger":
    global _logger
    if _logger is None:
        from fieldcheck.utilities.logging_patterns import get_logger as _get_structured_logger

        _logger = _get_structured_logger(__name__, component="errors")
    return _logger


class FieldcheckError(Exception):
    """Base exception class for all fieldcheck errors"""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        recoverable: bool = True,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now()
        self.original_error = original_error

    def add_context(self, **kwargs: Any) -> "FieldcheckError":
        """Add additional context to the error"""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat(),
        }


class ConfigurationError(FieldcheckError):
    """Raised when settings or field rules are wired incorrectly"""

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, error_code="CONFIG_ERROR", recoverable=False, **kwargs)
        if config_key:
            self.add_context(config_key=config_key)


class ValidationError(FieldcheckError):
    """Raised when a caller asks for failed field validation to be raised.

    ``errors`` maps each failing field to its error tag.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None, **kwargs: Any) -> None:
        super().__init__(message, error_code="VALIDATION_ERROR", recoverable=False, **kwargs)
        self.errors = dict(errors or {})
        if self.errors:
            self.add_context(errors=self.errors, error_count=len(self.errors))


def log_error(error: FieldcheckError, level: int = logging.ERROR) -> None:
    """Log an error with full context"""
    _get_logger().log(level, f"{error.error_code}: {error.message}", error_data=error.to_dict())


__all__ = [
    "FieldcheckError",
    "ConfigurationError",
    "ValidationError",
    "log_error",
]
