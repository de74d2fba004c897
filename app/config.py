"""Application configuration settings."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Process level settings loaded from environment variables."""

    # Greeting keys share the .env file, so unknown entries are ignored here.
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    app_name: str = Field(
        default="greeting-service",
        description="Name reported in logs and the OpenAPI document",
        min_length=1,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    profile: str | None = Field(
        default=None,
        description="Active configuration profile used for %profile. properties entries",
    )
    config_file: Path | None = Field(
        default=Path("application.properties"),
        description="Path to the application.properties file with greeting keys",
    )
    secrets_dir: Path | None = Field(
        default=None,
        description="Directory of mounted secret files, one file per configuration key",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return normalized

    @field_validator("profile")
    @classmethod
    def _blank_profile_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["ENV_FILE", "Settings", "get_settings", "reset_settings_cache"]
