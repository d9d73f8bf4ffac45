"""Centralised logging configuration for the ``fieldcheck`` package."""

from __future__ import annotations

import logging
from typing import Literal

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure(level: LogLevel | int | None = None) -> None:
    """Initialise standard logging with a consistent formatter.

    The library never calls this on import; applications opt in. When
    ``level`` is omitted the level comes from ``Settings.log_level``.
    """

    if level is None:
        from fieldcheck.settings import get_settings

        level = get_settings().log_level

    if isinstance(level, str):
        logging_level = logging.getLevelName(level.upper())
    else:
        logging_level = level

    logging.basicConfig(level=logging_level, format=DEFAULT_FORMAT)


__all__ = ["DEFAULT_FORMAT", "LogLevel", "configure"]
