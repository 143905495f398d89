"""TMDB extractor package.

Provides the async credits client for The Movie Database API.

Classes:
    TMDBClient: Async HTTP client for movie credits.

Exceptions:
    TMDBClientError: Base client error.
    TMDBConfigurationError: API key or base URL missing.
    TMDBNotFoundError: Resource not found.

Usage:
    from src.etl.extractors.tmdb import TMDBClient

    async with TMDBClient() as client:
        records = await client.get_all_movies_credits(movies)
"""

from src.etl.extractors.tmdb.client import (
    TMDBClient,
    TMDBClientError,
    TMDBConfigurationError,
    TMDBNotFoundError,
)

__all__ = [
    "TMDBClient",
    "TMDBClientError",
    "TMDBConfigurationError",
    "TMDBNotFoundError",
]
