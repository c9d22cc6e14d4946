"""TMDB API configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TMDBSettings(BaseSettings):
    """TMDB API configuration.

    Attributes:
        api_key: TMDB v3 API key, sent as the ``api_key`` query parameter.
        base_url: TMDB API base URL.
        page: Page of the popular list to import.
        timeout: Request timeout in seconds, None for no timeout.
        max_attempts: Attempts per request on network errors (1 = no retry).
        user_agent: HTTP User-Agent header.
    """

    api_key: str = Field(default="", alias="TMDB_API_KEY")
    base_url: str = Field(
        default="https://api.themoviedb.org/3",
        alias="TMDB_BASE_URL",
    )
    page: int = Field(default=1, alias="TMDB_PAGE")
    timeout: float | None = Field(default=None, alias="TMDB_TIMEOUT")
    max_attempts: int = Field(default=1, alias="TMDB_MAX_ATTEMPTS")
    user_agent: str = Field(
        default="MovieCatalog/1.0",
        alias="USER_AGENT",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_configured(self) -> bool:
        """Check if TMDB API key is configured."""
        return bool(self.api_key and self.api_key != "your_api_key_here")

    @property
    def movie_url(self) -> str:
        """Base URL of the per-movie endpoints."""
        return f"{self.base_url.rstrip('/')}/movie"

    @field_validator("page")
    @classmethod
    def validate_page(cls, v: int) -> int:
        """TMDB pages start at 1."""
        if v < 1:
            raise ValueError("TMDB_PAGE must be >= 1")
        return v

    @field_validator("max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        """At least one attempt is always made."""
        if v < 1:
            raise ValueError("TMDB_MAX_ATTEMPTS must be >= 1")
        return v
