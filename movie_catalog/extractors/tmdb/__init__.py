"""TMDB extractor package.

Classes:
    PopularMoviesExtractor: Popular list → details → credits pipeline.
    TMDBClient: HTTP fetcher returning normalized responses.
    TMDBEndpoints: Endpoint provider built from settings.
    TMDBNormalizer: Record building and merging.

Usage:
    from movie_catalog.extractors.tmdb import PopularMoviesExtractor, TMDBClient

    with TMDBClient() as client:
        extractor = PopularMoviesExtractor(client, endpoints, defaults)
        records = extractor.fetch_popular()
"""

from movie_catalog.extractors.tmdb.client import (
    FetchResponse,
    TMDBClient,
    TMDBClientError,
    TMDBConfigurationError,
)
from movie_catalog.extractors.tmdb.endpoints import (
    Endpoint,
    EndpointProvider,
    TMDBEndpoints,
)
from movie_catalog.extractors.tmdb.normalizer import TMDBNormalizer
from movie_catalog.extractors.tmdb.popular import PopularMoviesExtractor

__all__ = [
    "Endpoint",
    "EndpointProvider",
    "FetchResponse",
    "PopularMoviesExtractor",
    "TMDBClient",
    "TMDBClientError",
    "TMDBConfigurationError",
    "TMDBEndpoints",
    "TMDBNormalizer",
]
