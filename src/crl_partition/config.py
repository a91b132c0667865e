"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so the lookup itself stays free of configuration:
the base URL and serial always come from the caller, only ambient concerns
(logging) are configurable.

  CRL_PARTITION_LOG_LEVEL   DEBUG | INFO | WARNING | ERROR | CRITICAL (default WARNING)
  CRL_PARTITION_JSON_LOGS   true → JSON lines, false → console renderer (default false)

Invalid values are rejected when AppSettings() is constructed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """
    Root application settings.

    Load order (highest priority first):
      1. Environment variables (CRL_PARTITION_*)
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="CRL_PARTITION_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Minimum structlog level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names in any case; store them uppercased."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return level
