"""Async TMDB API client for movie credits.

Handles HTTP communication with The Movie Database API: authentication,
error mapping, and concurrent credit fetches for a movie catalog.
"""

import asyncio
import logging
from types import TracebackType
from typing import Any

import httpx

from src.etl.types import MovieCreditsRecord, MovieDescriptor, TMDBCreditsData
from src.settings import settings

logger = logging.getLogger(__name__)


class TMDBClientError(Exception):
    """Base exception for TMDB client errors."""

    pass


class TMDBConfigurationError(TMDBClientError):
    """Raised when the API key or base URL is missing."""

    pass


class TMDBNotFoundError(TMDBClientError):
    """Raised when resource is not found."""

    pass


class TMDBClient:
    """Async HTTP client for the TMDB credits endpoint.

    Usable as an async context manager sharing one connection pool,
    or directly: ``get_all_movies_credits`` opens a short-lived pool
    when none is active.

    Attributes:
        base_url: TMDB API base URL.
        api_key: TMDB API key.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize TMDB client with settings.

        Args:
            api_key: Overrides TMDB_API_KEY.
            base_url: Overrides TMDB_BASE_URL.
            transport: Custom httpx transport (tests).
        """
        self._base_url = (base_url or settings.tmdb.base_url).rstrip("/")
        self._api_key = api_key if api_key is not None else settings.tmdb.api_key
        self._language = settings.tmdb.language
        self._timeout = settings.tmdb.timeout
        self._transport = transport

        self._client: httpx.AsyncClient | None = None

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "TMDBClient":
        """Enter context and create HTTP client."""
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": settings.tmdb.user_agent},
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client.

        Args:
            _exc_type: Exception type if raised.
            _exc_val: Exception value if raised.
            _exc_tb: Exception traceback if raised.
        """
        if self._client:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # HTTP Methods
    # -------------------------------------------------------------------------

    async def _get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute GET request.

        Args:
            endpoint: API endpoint path.
            params: Optional query parameters.

        Returns:
            JSON response as dictionary.

        Raises:
            TMDBConfigurationError: When API key or base URL is missing.
            TMDBClientError: On API errors or when used outside a session.
            TMDBNotFoundError: When resource not found.
        """
        if not self._api_key or not self._base_url:
            raise TMDBConfigurationError("TMDB_API_KEY and TMDB_BASE_URL must be set")

        if self._client is None:
            msg = "Client not initialized. Use async context manager."
            raise TMDBClientError(msg)

        request_params = {"api_key": self._api_key, "language": self._language}
        if params:
            request_params.update(params)

        url = f"{self._base_url}{endpoint}"

        try:
            response = await self._client.get(url, params=request_params)
        except httpx.TimeoutException as e:
            logger.warning(f"Request timeout: {endpoint}")
            raise TMDBClientError(f"Timeout: {endpoint}") from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error on {endpoint}: {e}")
            raise TMDBClientError(f"Transport error: {endpoint}") from e

        return self._handle_response(response, endpoint)

    @staticmethod
    def _handle_response(
        response: httpx.Response,
        endpoint: str,
    ) -> dict[str, Any]:
        """Handle HTTP response and extract JSON.

        Args:
            response: HTTP response object.
            endpoint: API endpoint (for logging).

        Returns:
            JSON response as dictionary.

        Raises:
            TMDBClientError: On API errors.
            TMDBNotFoundError: When resource not found (404).
        """
        if response.status_code == 200:
            return response.json()

        if response.status_code == 404:
            raise TMDBNotFoundError(f"Not found: {endpoint}")

        error_msg = f"TMDB API error {response.status_code}: {endpoint}"
        logger.error(error_msg)
        raise TMDBClientError(error_msg)

    # -------------------------------------------------------------------------
    # API Endpoints
    # -------------------------------------------------------------------------

    async def get_movie_credits(self, movie_id: int) -> TMDBCreditsData:
        """Get movie cast and crew.

        Args:
            movie_id: TMDB movie ID.

        Returns:
            Credits response with cast and crew.
        """
        return await self._get(f"/movie/{movie_id}/credits")

    async def get_all_movies_credits(
        self,
        movies: list[MovieDescriptor],
    ) -> list[MovieCreditsRecord]:
        """Fetch credits for every movie concurrently.

        Fails as a whole when any single movie fails.

        Args:
            movies: Movies to fetch, as name/id pairs.

        Returns:
            One record per movie, in input order.
        """
        if self._client is None:
            async with self:
                return await self._gather_credits(movies)
        return await self._gather_credits(movies)

    async def _gather_credits(
        self,
        movies: list[MovieDescriptor],
    ) -> list[MovieCreditsRecord]:
        """Run the per-movie requests concurrently, preserving order."""
        logger.info(f"Fetching credits for {len(movies)} movies")

        credits_list = await asyncio.gather(
            *(self.get_movie_credits(movie["id"]) for movie in movies)
        )

        return [
            MovieCreditsRecord(movie_name=movie["name"], credits=credits)
            for movie, credits in zip(movies, credits_list)
        ]
