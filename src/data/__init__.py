"""Static catalog data."""

from src.data.catalog import ACTORS, MOVIES, movie_descriptors

__all__ = ["ACTORS", "MOVIES", "movie_descriptors"]
