"""Extractors package.

Provides the upstream credits source:
- TMDB: per-movie cast credits

Classes:
    TMDBClient: Async TMDB API client.
"""

from src.etl.extractors.tmdb import (
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
