"""Unit tests for the popular movies extractor."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from movie_catalog.extractors.tmdb import (
    FetchResponse,
    PopularMoviesExtractor,
    TMDBClient,
    TMDBEndpoints,
    TMDBNormalizer,
)


def _ok(payload: str) -> FetchResponse:
    return FetchResponse(200, "OK", payload)


@pytest.fixture
def extractor(
    transport,
    endpoints: TMDBEndpoints,
    record_defaults: dict[str, Any],
):
    with TMDBClient(transport=transport) as client:
        yield PopularMoviesExtractor(client, endpoints, record_defaults)


@pytest.mark.unit
class TestFetchPopular:
    @staticmethod
    def test_merges_three_calls(movie_42, extractor: PopularMoviesExtractor) -> None:
        records = extractor.fetch_popular()

        assert len(records) == 1
        record = records[0]
        assert record["sku"] == 42
        assert record["name"] == "X"
        assert record["description"] == "Y"
        assert record["genre"] == "Action,Drama"
        assert record["vote_average"] == 7.5
        assert record["year"] == "2019"
        assert record["actors"] == "A"
        assert record["director"] == "B"
        assert record["producer"] == "C"

    @staticmethod
    def test_call_order(movie_42, extractor: PopularMoviesExtractor) -> None:
        extractor.fetch_popular()
        assert movie_42.paths == ["/3/movie/popular", "/3/movie/42", "/3/movie/42/credits"]

    @staticmethod
    def test_requests_configured_page(movie_42, extractor: PopularMoviesExtractor) -> None:
        extractor.fetch_popular()
        assert movie_42.calls[0].url.params["page"] == "1"

    @staticmethod
    def test_requests_given_page(movie_42, transport, endpoints, record_defaults) -> None:
        with TMDBClient(transport=transport) as client:
            PopularMoviesExtractor(client, endpoints, record_defaults).fetch_popular(page=4)
        assert movie_42.calls[0].url.params["page"] == "4"

    @staticmethod
    def test_entries_without_id_skipped(
        fake_tmdb,
        extractor: PopularMoviesExtractor,
        details_payload,
        credits_payload,
    ) -> None:
        fake_tmdb.add(
            "/3/movie/popular",
            {"results": [{"title": "No id"}, {"id": 0, "title": "Zero"}, {"id": 42, "title": "X"}]},
        )
        fake_tmdb.add("/3/movie/42", details_payload)
        fake_tmdb.add("/3/movie/42/credits", credits_payload)

        records = extractor.fetch_popular()

        assert [r["sku"] for r in records] == [42]
        assert fake_tmdb.paths == ["/3/movie/popular", "/3/movie/42", "/3/movie/42/credits"]
        assert extractor.last_result.skipped == 2

    @staticmethod
    def test_popular_failure_returns_empty_list(fake_tmdb, extractor) -> None:
        fake_tmdb.fail("/3/movie/popular")

        assert extractor.fetch_popular() == []
        assert extractor.last_result.success is False

    @staticmethod
    def test_details_transport_failure_keeps_defaults(
        fake_tmdb,
        extractor: PopularMoviesExtractor,
        popular_payload,
        credits_payload,
    ) -> None:
        fake_tmdb.add("/3/movie/popular", popular_payload)
        fake_tmdb.fail("/3/movie/42")
        fake_tmdb.add("/3/movie/42/credits", credits_payload)

        records = extractor.fetch_popular()

        assert len(records) == 1
        assert records[0]["genre"] == ""
        assert records[0]["vote_average"] is None
        assert records[0]["year"] is None
        assert records[0]["director"] == "B"
        assert extractor.last_result.count == 1
        assert len(extractor.last_result.errors) == 1

    @staticmethod
    def test_credits_not_found_keeps_defaults(
        fake_tmdb,
        extractor: PopularMoviesExtractor,
        popular_payload,
        details_payload,
    ) -> None:
        fake_tmdb.add("/3/movie/popular", popular_payload)
        fake_tmdb.add("/3/movie/42", details_payload)

        record = extractor.fetch_popular()[0]

        assert record["genre"] == "Action,Drama"
        assert record["actors"] == ""
        assert record["producer"] == ""

    @staticmethod
    def test_malformed_credits_entries_do_not_stop_the_page(
        fake_tmdb,
        extractor: PopularMoviesExtractor,
        details_payload,
        credits_payload,
    ) -> None:
        fake_tmdb.add(
            "/3/movie/popular",
            {"results": [{"id": 42, "title": "X"}, {"id": 7, "title": "T"}]},
        )
        fake_tmdb.add("/3/movie/42", details_payload)
        fake_tmdb.add("/3/movie/42/credits", credits_payload)
        fake_tmdb.add("/3/movie/7", {"genres": [None, "Horror", {"name": "Drama"}]})
        fake_tmdb.add("/3/movie/7/credits", {"cast": ["A", {"name": "Z"}], "crew": [None]})

        records = extractor.fetch_popular()

        assert [r["sku"] for r in records] == [42, 7]
        assert records[0]["director"] == "B"
        assert records[1]["genre"] == "Drama"
        assert records[1]["actors"] == "Z"
        assert records[1]["director"] == ""
        assert records[1]["producer"] == ""


class _FailingCreditsNormalizer(TMDBNormalizer):
    def apply_credits(self, record, payload):
        raise TypeError("unexpected credits shape")


class TestMergeErrors:
    @staticmethod
    def test_normalizer_error_keeps_partial_record(
        movie_42,
        transport,
        endpoints: TMDBEndpoints,
        record_defaults: dict[str, Any],
    ) -> None:
        with TMDBClient(transport=transport) as client:
            extractor = PopularMoviesExtractor(
                client, endpoints, record_defaults, normalizer=_FailingCreditsNormalizer()
            )
            records = extractor.fetch_popular()

        assert len(records) == 1
        assert records[0]["genre"] == "Action,Drama"
        assert records[0]["actors"] == ""
        assert extractor.last_result.count == 1
        assert extractor.last_result.errors == [
            "TMDB credits 42 could not be merged: unexpected credits shape"
        ]


class TestResponseDecoding:
    @staticmethod
    def _extractor(responses: dict[str, FetchResponse], endpoints, defaults):
        client = MagicMock(spec=TMDBClient)
        client.fetch.side_effect = lambda url, params=None: responses[url]
        return PopularMoviesExtractor(client, endpoints, defaults)

    def test_invalid_json_details_ignored(self, endpoints, record_defaults) -> None:
        extractor = self._extractor(
            {
                endpoints.popular(1).url: _ok('{"results": [{"id": 7, "title": "T"}]}'),
                endpoints.details(7).url: _ok("<html>oops</html>"),
                endpoints.credits(7).url: _ok('{"cast": [{"name": "Z"}]}'),
            },
            endpoints,
            record_defaults,
        )

        record = extractor.fetch_popular()[0]

        assert record["year"] is None
        assert record["actors"] == "Z"

    def test_non_object_payload_ignored(self, endpoints, record_defaults) -> None:
        extractor = self._extractor(
            {endpoints.popular(1).url: _ok("[1, 2, 3]")},
            endpoints,
            record_defaults,
        )
        assert extractor.fetch_popular() == []

    def test_missing_results_key(self, endpoints, record_defaults) -> None:
        extractor = self._extractor(
            {endpoints.popular(1).url: _ok('{"page": 1}')},
            endpoints,
            record_defaults,
        )
        assert extractor.fetch_popular() == []

    def test_extract_delegates_to_fetch_popular(self, endpoints, record_defaults) -> None:
        extractor = self._extractor(
            {endpoints.popular(3).url: _ok('{"results": []}')},
            endpoints,
            record_defaults,
        )
        assert extractor.extract(page=3) == []
