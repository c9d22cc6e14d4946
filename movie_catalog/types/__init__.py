"""Data types package.

Usage:
    from movie_catalog.types import MergedMovieRecord, TMDBPopularResult
"""

from movie_catalog.types.catalog import MergedMovieRecord
from movie_catalog.types.tmdb import (
    TMDBCastData,
    TMDBCreditsResponse,
    TMDBCrewData,
    TMDBDetailsResponse,
    TMDBGenreData,
    TMDBPopularResult,
)

__all__ = [
    "MergedMovieRecord",
    "TMDBCastData",
    "TMDBCreditsResponse",
    "TMDBCrewData",
    "TMDBDetailsResponse",
    "TMDBGenreData",
    "TMDBPopularResult",
]
