"""ETL data types package.

Exports the TypedDict definitions for raw TMDB credit payloads
consumed by the aggregation engine.

Usage:
    from src.etl.types import MovieCreditsRecord, MovieDescriptor
"""

from src.etl.types.tmdb import (
    MovieCreditsRecord,
    MovieDescriptor,
    TMDBCastData,
    TMDBCreditsData,
    TMDBCrewData,
)

__all__ = [
    "MovieCreditsRecord",
    "MovieDescriptor",
    "TMDBCastData",
    "TMDBCreditsData",
    "TMDBCrewData",
]
