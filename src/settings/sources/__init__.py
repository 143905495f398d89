"""Data source settings.

Exports configuration for the upstream credits source (TMDB API).
"""

from src.settings.sources.tmdb import TMDBSettings

__all__ = ["TMDBSettings"]
