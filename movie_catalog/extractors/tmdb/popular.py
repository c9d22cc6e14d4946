"""TMDB popular movies extractor.

Fetches a page of popular movies and merges, for each entry,
the details and credits responses into one record.
"""

from collections.abc import Mapping
from typing import Any

from movie_catalog.extractors.base import BaseExtractor
from movie_catalog.extractors.tmdb.client import FetchResponse, TMDBClient
from movie_catalog.extractors.tmdb.endpoints import Endpoint, EndpointProvider
from movie_catalog.extractors.tmdb.normalizer import TMDBNormalizer
from movie_catalog.types import MergedMovieRecord


class PopularMoviesExtractor(BaseExtractor):
    """Builds merged movie records from the popular list.

    Each kept entry costs three requests (popular is shared):
    details then credits, strictly in sequence.

    Attributes:
        client: Open TMDB client.
        endpoints: Endpoint provider.
    """

    name = "tmdb.popular"

    def __init__(
        self,
        client: TMDBClient,
        endpoints: EndpointProvider,
        defaults: Mapping[str, Any],
        default_page: int = 1,
        normalizer: TMDBNormalizer | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            client: TMDB client, already entered.
            endpoints: Provider of the popular, details and credits URLs.
            defaults: Fixed catalog fields copied into every record.
            default_page: Page fetched when none is given.
            normalizer: Record normalizer.
        """
        super().__init__()
        self.client = client
        self.endpoints = endpoints
        self._defaults = dict(defaults)
        self._default_page = default_page
        self._normalizer = normalizer or TMDBNormalizer()

    def extract(self, **kwargs: Any) -> list[MergedMovieRecord]:
        """Execute extraction (see fetch_popular).

        Args:
            **kwargs: page: popular list page.
        """
        return self.fetch_popular(kwargs.get("page"))

    # -------------------------------------------------------------------------
    # Popular List
    # -------------------------------------------------------------------------

    def fetch_popular(self, page: int | None = None) -> list[MergedMovieRecord]:
        """Fetch a popular page and merge details and credits per movie.

        Entries without an id are dropped before any further request.

        Args:
            page: Popular list page, defaults to the configured page.

        Returns:
            Fully merged records in list order.
        """
        page = page or self._default_page
        self._start_extraction()

        records: list[MergedMovieRecord] = []
        payload = self._fetch_json(self.endpoints.popular(page), f"popular page {page}")
        if payload is None:
            self._end_extraction()
            return records

        for result in payload.get("results") or []:
            movie_id = result.get("id") if isinstance(result, Mapping) else None
            if not movie_id:
                self._skipped_count += 1
                self.logger.debug("Skipping popular entry without id")
                continue

            record = self._normalizer.build_base_record(result, self._defaults)
            record = self.merge_details(record, movie_id)
            record = self.merge_credits(record, movie_id)
            records.append(record)
            self._extracted_count += 1

        self._end_extraction()
        return records

    # -------------------------------------------------------------------------
    # Merges
    # -------------------------------------------------------------------------

    def merge_details(
        self,
        record: MergedMovieRecord,
        movie_id: int | str,
    ) -> MergedMovieRecord:
        """Merge the details endpoint into a record.

        Args:
            record: Record built so far.
            movie_id: TMDB movie ID.

        Returns:
            Merged record, or the unchanged record if the call or the
            merge failed.
        """
        payload = self._fetch_json(self.endpoints.details(movie_id), f"details {movie_id}")
        if payload is None:
            return record
        try:
            return self._normalizer.apply_details(record, payload)  # type: ignore[arg-type]
        except (AttributeError, TypeError, ValueError) as e:
            self._log_warning(f"TMDB details {movie_id} could not be merged: {e}")
            return record

    def merge_credits(
        self,
        record: MergedMovieRecord,
        movie_id: int | str,
    ) -> MergedMovieRecord:
        """Merge the credits endpoint into a record.

        Args:
            record: Record built so far.
            movie_id: TMDB movie ID.

        Returns:
            Merged record, or the unchanged record if the call or the
            merge failed.
        """
        payload = self._fetch_json(self.endpoints.credits(movie_id), f"credits {movie_id}")
        if payload is None:
            return record
        try:
            return self._normalizer.apply_credits(record, payload)  # type: ignore[arg-type]
        except (AttributeError, TypeError, ValueError) as e:
            self._log_warning(f"TMDB credits {movie_id} could not be merged: {e}")
            return record

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _fetch_json(self, endpoint: Endpoint, label: str) -> dict[str, Any] | None:
        """Fetch an endpoint and decode its JSON object.

        Args:
            endpoint: URL and query parameters.
            label: Human-readable call description for logs.

        Returns:
            Decoded object or None when the call or decoding failed.
        """
        response = self.client.fetch(endpoint.url, endpoint.params)
        return self._decode(response, label)

    def _decode(self, response: FetchResponse, label: str) -> dict[str, Any] | None:
        """Decode a response body, recording failures.

        Args:
            response: Fetch response.
            label: Human-readable call description.

        Returns:
            Decoded object or None.
        """
        if not response.ok:
            self._log_warning(f"TMDB {label} failed: {response.status} {response.reason}")
            return None

        try:
            payload = response.json()
        except ValueError as e:
            self._log_warning(f"TMDB {label} returned invalid JSON: {e}")
            return None

        if not isinstance(payload, dict):
            self._log_warning(f"TMDB {label} returned {type(payload).__name__}, expected object")
            return None
        return payload
