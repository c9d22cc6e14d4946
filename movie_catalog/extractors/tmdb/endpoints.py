"""TMDB endpoint provider.

Builds the URL and query parameters of the popular, details
and credits endpoints so the extractor never handles literals.
"""

from typing import Any, NamedTuple, Protocol

from movie_catalog.settings import TMDBSettings


class Endpoint(NamedTuple):
    """URL and query parameters of one API call."""

    url: str
    params: dict[str, Any]


class EndpointProvider(Protocol):
    """Anything able to locate the three movie endpoints."""

    def popular(self, page: int) -> Endpoint: ...

    def details(self, movie_id: int | str) -> Endpoint: ...

    def credits(self, movie_id: int | str) -> Endpoint: ...


class TMDBEndpoints:
    """TMDB v3 endpoints authenticated with an ``api_key`` query parameter.

    Attributes:
        movie_url: Base URL of the movie resources.
    """

    def __init__(self, movie_url: str, api_key: str) -> None:
        self.movie_url = movie_url.rstrip("/")
        self._api_key = api_key

    @classmethod
    def from_settings(cls, tmdb: TMDBSettings) -> "TMDBEndpoints":
        """Create endpoints from TMDB settings."""
        return cls(tmdb.movie_url, tmdb.api_key)

    def popular(self, page: int) -> Endpoint:
        return Endpoint(
            f"{self.movie_url}/popular",
            {"api_key": self._api_key, "page": page},
        )

    def details(self, movie_id: int | str) -> Endpoint:
        return Endpoint(f"{self.movie_url}/{movie_id}", {"api_key": self._api_key})

    def credits(self, movie_id: int | str) -> Endpoint:
        return Endpoint(
            f"{self.movie_url}/{movie_id}/credits",
            {"api_key": self._api_key},
        )
