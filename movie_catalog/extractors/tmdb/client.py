"""TMDB HTTP fetcher.

Issues GET requests against The Movie Database API and
normalizes every outcome, including transport failures,
into a FetchResponse so callers follow a single code path.
"""

import json
import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any

import httpx
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from movie_catalog.exceptions import CatalogError
from movie_catalog.settings import settings

logger = logging.getLogger(__name__)


class TMDBClientError(CatalogError):
    """Base exception for TMDB client errors."""

    pass


class TMDBConfigurationError(TMDBClientError):
    """Raised when the TMDB API key is missing."""

    pass


@dataclass(frozen=True)
class FetchResponse:
    """Status, reason and body of a fetch.

    Transport failures produce a synthetic response whose status is
    the failure's status code (0 when no response was received) and
    whose reason holds the failure message.

    Attributes:
        status: HTTP status code.
        reason: Reason phrase or failure message.
        body: Raw response body.
    """

    status: int
    reason: str
    body: str = ""

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.body)


class TMDBClient:
    """HTTP client for the TMDB API.

    Use as a context manager; the underlying httpx client lives
    for the duration of the block.

    Attributes:
        timeout: Request timeout in seconds, None to disable.
        max_attempts: Attempts on network errors (1 = no retry).
    """

    def __init__(
        self,
        timeout: float | None = None,
        max_attempts: int | None = None,
        transport: httpx.BaseTransport | None = None,
        retry_wait: wait_base | None = None,
    ) -> None:
        """Initialize TMDB client.

        Args:
            timeout: Request timeout, defaults to TMDB_TIMEOUT.
            max_attempts: Attempts per request, defaults to TMDB_MAX_ATTEMPTS.
            transport: Optional httpx transport (used by tests).
            retry_wait: Wait strategy between attempts.
        """
        self.timeout = timeout if timeout is not None else settings.tmdb.timeout
        self.max_attempts = max_attempts or settings.tmdb.max_attempts
        self._transport = transport
        self._retry_wait = retry_wait or wait_exponential(multiplier=1, min=2, max=10)
        self._client: httpx.Client | None = None

    def __enter__(self) -> "TMDBClient":
        """Enter context and create HTTP client."""
        self._client = httpx.Client(
            timeout=self.timeout,
            headers={"User-Agent": settings.tmdb.user_agent},
            transport=self._transport,
        )
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        method: str = "GET",
    ) -> FetchResponse:
        """Send a request and return its normalized response.

        Args:
            url: Absolute endpoint URL.
            params: Optional query parameters.
            method: HTTP method.

        Returns:
            FetchResponse, synthetic on transport or HTTP status failure.

        Raises:
            TMDBClientError: If the client is used outside its context.
        """
        if self._client is None:
            msg = "Client not initialized. Use context manager."
            raise TMDBClientError(msg)

        retrying = Retrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.max_attempts),
            wait=self._retry_wait,
            reraise=True,
        )

        try:
            response = retrying(self._send, self._client, method, url, params or {})
        except httpx.HTTPStatusError as e:
            logger.warning(f"{method} {url} failed: {e.response.status_code}")
            return FetchResponse(status=e.response.status_code, reason=str(e))
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            return FetchResponse(status=0, reason=str(e) or type(e).__name__)

        return FetchResponse(
            status=response.status_code,
            reason=response.reason_phrase,
            body=response.text,
        )

    @staticmethod
    def _send(
        client: httpx.Client,
        method: str,
        url: str,
        params: dict[str, Any],
    ) -> httpx.Response:
        """Execute a single request, raising on non-2xx status."""
        response = client.request(method, url, params=params)
        response.raise_for_status()
        return response
