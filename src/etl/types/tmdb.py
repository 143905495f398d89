"""TMDB API data types.

TypedDict definitions for the credit payloads returned by
The Movie Database (TMDB) API and for the records handed to
the aggregation engine.
"""

from typing import NotRequired, TypedDict


class TMDBCastData(TypedDict):
    """Cast member data from TMDB credits endpoint.

    TMDB occasionally omits ``character`` for stub entries, so
    consumers must not assume either key is present.
    """

    name: NotRequired[str | None]
    character: NotRequired[str | None]
    id: NotRequired[int]
    order: NotRequired[int]
    profile_path: NotRequired[str | None]


class TMDBCrewData(TypedDict):
    """Crew member data from TMDB credits endpoint."""

    id: int
    name: str
    department: str
    job: str
    profile_path: NotRequired[str | None]


class TMDBCreditsData(TypedDict, total=False):
    """Combined credits data from TMDB API."""

    id: int
    cast: list[TMDBCastData] | None
    crew: list[TMDBCrewData]


class MovieDescriptor(TypedDict):
    """Tracked movie: display title and TMDB identifier."""

    name: str
    id: int


class MovieCreditsRecord(TypedDict):
    """Credits of one tracked movie, in catalog order."""

    movie_name: str
    credits: NotRequired[TMDBCreditsData | None]
