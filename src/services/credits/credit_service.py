"""Credit aggregation service.

Fetches the tracked catalog's cast credits once, builds the three
aggregated views, and serves them to the API layer.
"""

from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Protocol

from src.data import ACTORS, MOVIES, movie_descriptors
from src.etl.aggregation import Appearance, CreditViews, SimilarityMatcher, build_views
from src.etl.extractors.tmdb import TMDBClient
from src.etl.types import MovieCreditsRecord, MovieDescriptor
from src.services.credits.coordinator import FetchCoordinator, FetchState


class CreditsSource(Protocol):
    """Upstream collaborator returning raw per-movie cast lists."""

    async def get_all_movies_credits(
        self,
        movies: list[MovieDescriptor],
    ) -> list[MovieCreditsRecord]:
        """Return one credits record per movie, in input order."""
        ...


class CreditService:
    """Serves the aggregated credit views.

    The upstream fetch and view building run once per service
    lifetime; concurrent first callers share the same fetch.

    Attributes:
        performers: Tracked performer names (read-only).
    """

    def __init__(
        self,
        credits_source: CreditsSource,
        movies: Mapping[str, int],
        actors: Iterable[str],
        matcher: SimilarityMatcher | None = None,
    ) -> None:
        """Initialize service.

        Args:
            credits_source: Upstream client with ``get_all_movies_credits``.
            movies: Movie titles mapped to TMDB IDs, in fetch order.
            actors: Performer names to track.
            matcher: Role identity predicate. Defaults to configured thresholds.
        """
        self._source = credits_source
        self._movies = dict(movies)
        self.performers: frozenset[str] = frozenset(actors)
        self._matcher = matcher or SimilarityMatcher.from_settings()
        self._coordinator: FetchCoordinator[CreditViews] = FetchCoordinator(
            self._fetch_and_process,
            name="credits",
        )

    @property
    def data_state(self) -> FetchState:
        """State of the underlying fetch (empty, fetching, cached)."""
        return self._coordinator.state

    @property
    def fetch_count(self) -> int:
        """Number of upstream fetches started."""
        return self._coordinator.fetch_count

    async def _fetch_and_process(self) -> CreditViews:
        """Fetch every movie's credits and build the three views."""
        credits_data = await self._source.get_all_movies_credits(
            movie_descriptors(self._movies)
        )
        return build_views(credits_data, self.performers, self._matcher)

    async def get_views(self) -> CreditViews:
        """Get the full view snapshot, fetching it if not cached."""
        return await self._coordinator.get()

    async def get_movies_per_actor(self) -> Mapping[str, list[str]]:
        """Gets the map of performers to the movies they appeared in."""
        views = await self.get_views()
        return views.performer_titles

    async def get_actors_with_multiple_characters(self) -> Mapping[str, list[Appearance]]:
        """Gets performers who played multiple distinct characters."""
        views = await self.get_views()
        return views.performer_role_groups

    async def get_characters_with_multiple_actors(self) -> Mapping[str, list[Appearance]]:
        """Gets characters played by multiple performers."""
        views = await self.get_views()
        return views.role_performer_appearances


@lru_cache(maxsize=1)
def get_credit_service() -> CreditService:
    """Get singleton credit service wired to TMDB and the default catalog.

    Returns:
        Cached CreditService instance.
    """
    return CreditService(
        credits_source=TMDBClient(),
        movies=MOVIES,
        actors=ACTORS,
    )
