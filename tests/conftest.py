"""Shared pytest fixtures for the catalog generator tests."""

from collections.abc import Generator
from typing import Any

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from movie_catalog.database import DatabaseConnection
from movie_catalog.extractors.tmdb import TMDBEndpoints
from movie_catalog.settings import CatalogSettings

API_BASE = "https://api.themoviedb.org/3"

_ENV_VARS = [
    "TMDB_API_KEY",
    "TMDB_BASE_URL",
    "TMDB_PAGE",
    "TMDB_TIMEOUT",
    "TMDB_MAX_ATTEMPTS",
    "USER_AGENT",
    "CATALOG_DEFAULT_PRICE",
    "CATALOG_DEFAULT_QTY",
    "CATALOG_STATUS_ENABLED",
    "CATALOG_TYPE_ID",
    "CATALOG_ATTRIBUTE_SET_ID",
    "CATALOG_CATEGORY_ID",
    "CATALOG_MAX_CONSECUTIVE_FAILURES",
    "DATABASE_URL",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "LOG_LEVEL",
    "LOG_DIR",
]


@pytest.fixture(autouse=True)
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from the developer environment."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("TMDB_API_KEY", "test_api_key")
    monkeypatch.setenv("ENVIRONMENT", "test")


class FakeTMDB:
    """httpx.MockTransport handler serving canned TMDB responses.

    Unknown paths answer 404. Routes registered with an exception
    raise it, simulating a transport failure.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any] | Exception] = {}
        self.calls: list[httpx.Request] = []

    def add(self, path: str, payload: Any = None, status: int = 200) -> None:
        self.routes[path] = (status, payload)

    def fail(self, path: str, error: Exception | None = None) -> None:
        self.routes[path] = error or httpx.ConnectError("connection refused")

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.calls]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"status_message": "not found"})
        if isinstance(route, Exception):
            raise route
        status, payload = route
        return httpx.Response(status, json=payload)


@pytest.fixture
def fake_tmdb() -> FakeTMDB:
    return FakeTMDB()


@pytest.fixture
def transport(fake_tmdb: FakeTMDB) -> httpx.MockTransport:
    return httpx.MockTransport(fake_tmdb)


@pytest.fixture
def endpoints() -> TMDBEndpoints:
    return TMDBEndpoints(f"{API_BASE}/movie", "test_api_key")


@pytest.fixture
def record_defaults() -> dict[str, Any]:
    return CatalogSettings().record_defaults()


@pytest.fixture
def database() -> Generator[DatabaseConnection, None, None]:
    """In-memory SQLite catalog with tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = DatabaseConnection(engine)
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def popular_payload() -> dict[str, Any]:
    """Popular list with one movie."""
    return {
        "page": 1,
        "total_pages": 500,
        "total_results": 10000,
        "results": [{"id": 42, "title": "X", "overview": "Y"}],
    }


@pytest.fixture
def details_payload() -> dict[str, Any]:
    return {
        "id": 42,
        "genres": [{"id": 28, "name": "Action"}, {"id": 18, "name": "Drama"}],
        "vote_average": 7.5,
        "release_date": "2019-01-01",
        "runtime": 120,
    }


@pytest.fixture
def credits_payload() -> dict[str, Any]:
    return {
        "id": 42,
        "cast": [{"id": 1, "name": "A", "character": "Hero", "order": 0}],
        "crew": [
            {"id": 2, "name": "B", "job": "Director", "department": "Directing"},
            {"id": 3, "name": "C", "job": "Producer", "department": "Production"},
            {"id": 4, "name": "D", "job": "Screenplay", "department": "Writing"},
        ],
    }


@pytest.fixture
def movie_42(
    fake_tmdb: FakeTMDB,
    popular_payload: dict[str, Any],
    details_payload: dict[str, Any],
    credits_payload: dict[str, Any],
) -> FakeTMDB:
    """Fake API serving the single-movie scenario."""
    fake_tmdb.add("/3/movie/popular", popular_payload)
    fake_tmdb.add("/3/movie/42", details_payload)
    fake_tmdb.add("/3/movie/42/credits", credits_payload)
    return fake_tmdb
