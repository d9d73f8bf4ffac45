"""Typed configuration backed by environment variables."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fieldcheck.errors import ConfigurationError, log_error

_DEFAULT_ENV_FILES: tuple[Path, ...] = (Path(".env"),)

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Library configuration loaded from ``FIELDCHECK_*`` variables and an optional `.env`."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="FIELDCHECK_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Level used by fieldcheck.logging.configure() when none is given.",
    )
    email_check_deliverability: bool = Field(
        default=False,
        description="Resolve the domain of email addresses (performs DNS queries).",
    )
    email_allow_smtputf8: bool = Field(
        default=True,
        description="Accept internationalized local parts in email addresses.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


def _existing_env_files() -> list[str]:
    return [str(path) for path in _DEFAULT_ENV_FILES if path.exists()]


@lru_cache
def get_settings(_env_files: Sequence[str] | None = None) -> Settings:
    """Load settings once per process, respecting `.env` fallbacks."""
    env_files = list(_env_files) if _env_files is not None else _existing_env_files()
    try:
        if env_files:
            return Settings(_env_file=env_files)
        return Settings()
    except ValidationError as exc:
        error = ConfigurationError(
            f"Invalid fieldcheck settings: {exc.error_count()} error(s)",
            config_key=",".join(str(err["loc"][0]) for err in exc.errors() if err["loc"]),
            original_error=exc,
        )
        log_error(error, level=logging.WARNING)
        raise error from exc


__all__ = ["Settings", "get_settings"]
