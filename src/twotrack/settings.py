"""
Settings — typed logging configuration loaded from the environment.

Uses pydantic-settings so an application embedding twotrack can tune the
library's log output without code changes:

    TWOTRACK_LOG_LEVEL=DEBUG      show try_catch captures
    TWOTRACK_JSON_LOGS=true       JSON lines instead of console output

Values may also come from a .env file in the working directory. Invalid
values fail at construction time with a pydantic ValidationError.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LoggingSettings(BaseSettings):
    """
    Logging configuration consumed by configure_structlog().

    Load order (highest priority first):
      1. Keyword arguments
      2. Environment variables (TWOTRACK_ prefix)
      3. .env file
      4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TWOTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level emitted by twotrack loggers")
    json_logs: bool = Field(default=False, description="Render JSON lines instead of console output")
    cache_loggers: bool = Field(default=True, description="Cache bound loggers on first use")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names in any case, normalised to upper case."""
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}, got {value!r}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]
