"""TMDB movie record normalizer.

Builds the merged movie record from the popular list entry and
overlays the fields owned by the details and credits responses.
Every step returns a new record and only writes its own keys.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from movie_catalog.types import (
    MergedMovieRecord,
    TMDBCreditsResponse,
    TMDBDetailsResponse,
    TMDBPopularResult,
)

logger = logging.getLogger(__name__)


class TMDBNormalizer:
    """Folds TMDB responses into a MergedMovieRecord.

    Details own ``genre``, ``vote_average`` and ``year``; credits own
    ``actors``, ``director`` and ``producer``.
    """

    DIRECTOR_JOB = "director"
    PRODUCER_JOB = "producer"
    NAME_SEPARATOR = ","

    # -------------------------------------------------------------------------
    # Base Record
    # -------------------------------------------------------------------------

    @staticmethod
    def build_base_record(
        result: TMDBPopularResult,
        defaults: Mapping[str, Any],
    ) -> MergedMovieRecord:
        """Build the base record of a popular list entry.

        Args:
            result: Raw entry of the popular list.
            defaults: Fixed catalog fields (price, qty, status, type,
                attribute set, categories).

        Returns:
            Record with empty detail and credit fields.
        """
        record: dict[str, Any] = {
            "sku": result.get("id") or "",
            "name": result.get("title") or "",
            "description": result.get("overview") or "",
            "genre": "",
            "actors": "",
            "director": "",
            "producer": "",
            "vote_average": None,
            "year": None,
        }
        record.update(defaults)
        return record  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Details
    # -------------------------------------------------------------------------

    def apply_details(
        self,
        record: MergedMovieRecord,
        payload: TMDBDetailsResponse,
    ) -> MergedMovieRecord:
        """Overlay details fields onto a record.

        Args:
            record: Record built so far.
            payload: Decoded details response.

        Returns:
            New record with genre, vote_average and year set from the
            keys present in the payload.
        """
        fields: dict[str, Any] = {}

        if "genres" in payload:
            fields["genre"] = self._join_names(payload["genres"])
        if "vote_average" in payload:
            fields["vote_average"] = payload["vote_average"]
        if "release_date" in payload:
            fields["year"] = self._extract_year(payload["release_date"])

        return {**record, **fields}  # type: ignore[typeddict-item]

    # -------------------------------------------------------------------------
    # Credits
    # -------------------------------------------------------------------------

    def apply_credits(
        self,
        record: MergedMovieRecord,
        payload: TMDBCreditsResponse,
    ) -> MergedMovieRecord:
        """Overlay credits fields onto a record.

        Args:
            record: Record built so far.
            payload: Decoded credits response.

        Returns:
            New record with actors, director and producer set from the
            keys present in the payload.
        """
        fields: dict[str, Any] = {}

        if "cast" in payload:
            fields["actors"] = self._join_names(payload["cast"])
        if "crew" in payload:
            directors, producers = self._partition_crew(payload["crew"])
            fields["director"] = self.NAME_SEPARATOR.join(directors)
            fields["producer"] = self.NAME_SEPARATOR.join(producers)

        return {**record, **fields}  # type: ignore[typeddict-item]

    def _partition_crew(
        self,
        crew: Iterable[Mapping[str, Any]] | None,
    ) -> tuple[list[str], list[str]]:
        """Split crew names into directors and producers.

        Jobs are compared case-insensitively; other jobs are ignored.

        Args:
            crew: Raw crew entries.

        Returns:
            Director names and producer names in source order.
        """
        directors: list[str] = []
        producers: list[str] = []

        for member in self._entries(crew):
            name = member.get("name")
            if name is None:
                continue
            job = str(member.get("job") or "").lower()
            if job == self.DIRECTOR_JOB:
                directors.append(str(name))
            if job == self.PRODUCER_JOB:
                producers.append(str(name))

        return directors, producers

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _join_names(self, items: Iterable[Mapping[str, Any]] | None) -> str:
        """Join the ``name`` field of each item with commas.

        Items without a name, and entries that are not objects, are
        left out.
        """
        names = [str(item["name"]) for item in self._entries(items) if item.get("name") is not None]
        return self.NAME_SEPARATOR.join(names)

    @staticmethod
    def _entries(items: object) -> list[Mapping[str, Any]]:
        """Keep the object entries of a list field.

        Anything other than a list yields nothing; non-object
        entries such as null or plain strings are dropped.
        """
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, Mapping)]

    @staticmethod
    def _extract_year(date_str: object) -> str | None:
        """Extract a four-digit year from a release date.

        Args:
            date_str: Date string in YYYY-MM-DD format.

        Returns:
            Year string or None when absent or unparseable.
        """
        if not date_str or not isinstance(date_str, str):
            return None
        try:
            parsed = date.fromisoformat(date_str.strip())
        except ValueError:
            logger.debug(f"Invalid release date: {date_str}")
            return None
        return f"{parsed.year:04d}"
