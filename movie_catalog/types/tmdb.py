"""TMDB API data types.

TypedDict definitions for the payloads returned by the
popular, details and credits endpoints.
"""

from typing import NotRequired, TypedDict


class TMDBGenreData(TypedDict):
    """Genre data from TMDB API."""

    id: int
    name: str


class TMDBCastData(TypedDict):
    """Cast member data from TMDB credits endpoint."""

    id: int
    name: str
    character: NotRequired[str]
    order: NotRequired[int]


class TMDBCrewData(TypedDict):
    """Crew member data from TMDB credits endpoint."""

    id: int
    name: str
    job: str
    department: NotRequired[str]


class TMDBPopularResult(TypedDict):
    """Single entry of the popular movies list."""

    id: int
    title: str
    overview: str
    release_date: NotRequired[str | None]
    vote_average: NotRequired[float]


class TMDBDetailsResponse(TypedDict, total=False):
    """Fields of the movie details response used by the catalog."""

    id: int
    genres: list[TMDBGenreData]
    vote_average: float | None
    release_date: str | None


class TMDBCreditsResponse(TypedDict, total=False):
    """Response from TMDB movie/{id}/credits endpoint."""

    id: int
    cast: list[TMDBCastData]
    crew: list[TMDBCrewData]
