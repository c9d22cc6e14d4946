"""Centralized configuration for the movie catalog generator.

All configuration values are sourced from environment variables (.env file).

Usage:
    from movie_catalog.settings import settings

    settings.tmdb.api_key
    settings.catalog.default_price
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movie_catalog.settings.base import LoggingSettings
from movie_catalog.settings.catalog import CatalogSettings
from movie_catalog.settings.database import DatabaseSettings
from movie_catalog.settings.tmdb import TMDBSettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "CatalogSettings",
    "DatabaseSettings",
    "TMDBSettings",
    "get_masked_settings",
]


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from movie_catalog.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    tmdb: TMDBSettings = Field(default_factory=TMDBSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower


settings = Settings()


def get_masked_settings() -> dict[str, Any]:
    """Return settings dict with sensitive values masked.

    Returns:
        Configuration dictionary safe for logging.
    """
    config = settings.model_dump()
    mask = "***MASKED***"

    secrets = [
        ("tmdb", "api_key"),
        ("database", "password"),
        ("database", "url"),
    ]

    for section, key in secrets:
        if section in config and key in config[section] and config[section][key]:
            config[section][key] = mask

    return config
