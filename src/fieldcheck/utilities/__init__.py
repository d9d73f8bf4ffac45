"""Shared helpers: value inspection and structured logging."""

from .logging_patterns import StructuredLogger, get_logger
from .reflection import Ref, indirect, is_empty

__all__ = [
    "Ref",
    "indirect",
    "is_empty",
    "StructuredLogger",
    "get_logger",
]
