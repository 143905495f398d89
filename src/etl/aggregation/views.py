"""Aggregation views over raw cast credits.

Three independent reducers, each a single pass over the tracked
performers' appearances:

- performer -> titles appeared in;
- performer -> one representative appearance per distinct role
  (performers with more than one role only);
- role -> every appearance (roles played by more than one performer only).

Records without cast data and cast entries without a name are skipped,
never raised. The role-based views also skip entries whose character
is absent or null; a blank character is kept as its own identity group.
"""

import logging
from collections.abc import Iterable, Iterator

from src.etl.aggregation.clusterer import cluster_appearances
from src.etl.aggregation.matcher import SimilarityMatcher
from src.etl.aggregation.schemas import (
    Appearance,
    CreditViews,
    PerformerToRoleGroups,
    PerformerToTitles,
    RoleToPerformerAppearances,
)
from src.etl.types import MovieCreditsRecord

logger = logging.getLogger(__name__)


# =============================================================================
# APPEARANCE EXTRACTION
# =============================================================================


def iter_appearances(
    credits_data: Iterable[MovieCreditsRecord],
    performers: frozenset[str] | set[str],
    require_role: bool = True,
) -> Iterator[Appearance]:
    """Yield appearances of tracked performers in input order.

    Args:
        credits_data: Per-movie credit records.
        performers: Tracked performer names.
        require_role: Skip cast entries whose character is absent or null.
            Blank labels are kept; they never match any other label.

    Yields:
        One Appearance per qualifying cast entry.
    """
    skipped = 0

    for record in credits_data:
        movie_title = record.get("movie_name")
        cast = (record.get("credits") or {}).get("cast")
        if not movie_title or not cast:
            continue

        for entry in cast:
            performer = entry.get("name")
            if not isinstance(performer, str) or not performer:
                skipped += 1
                continue
            if performer not in performers:
                continue

            role_label = entry.get("character")
            if not isinstance(role_label, str):
                if require_role:
                    skipped += 1
                    continue
                role_label = ""

            yield Appearance(
                movie_title=movie_title,
                performer_name=performer,
                role_label=role_label,
            )

    if skipped:
        logger.debug("Skipped %d malformed cast entries", skipped)


# =============================================================================
# REDUCERS
# =============================================================================


def build_performer_titles(
    credits_data: Iterable[MovieCreditsRecord],
    performers: frozenset[str] | set[str],
) -> PerformerToTitles:
    """Map each tracked performer to the titles they appeared in.

    Duplicates are preserved: a performer credited twice in one cast
    lists that title twice.

    Args:
        credits_data: Per-movie credit records.
        performers: Tracked performer names.

    Returns:
        Performer name to movie titles, in input order.
    """
    result: PerformerToTitles = {}

    for appearance in iter_appearances(credits_data, performers, require_role=False):
        result.setdefault(appearance.performer_name, []).append(appearance.movie_title)

    return result


def build_performer_role_groups(
    credits_data: Iterable[MovieCreditsRecord],
    performers: frozenset[str] | set[str],
    matcher: SimilarityMatcher | None = None,
) -> PerformerToRoleGroups:
    """Find performers who played more than one distinct character.

    Each performer's appearances are clustered on their own; clustering
    never runs across performers for this view.

    Args:
        credits_data: Per-movie credit records.
        performers: Tracked performer names.
        matcher: Same-identity predicate.

    Returns:
        Performer name to the leader appearance of each identity group,
        in group creation order.
    """
    by_performer: dict[str, list[Appearance]] = {}
    for appearance in iter_appearances(credits_data, performers):
        by_performer.setdefault(appearance.performer_name, []).append(appearance)

    result: PerformerToRoleGroups = {}

    for performer, appearances in by_performer.items():
        groups = cluster_appearances(appearances, matcher)
        if len(groups) > 1:
            result[performer] = [group.leader for group in groups]

    return result


def build_role_performer_appearances(
    credits_data: Iterable[MovieCreditsRecord],
    performers: frozenset[str] | set[str],
    matcher: SimilarityMatcher | None = None,
) -> RoleToPerformerAppearances:
    """Find characters played by more than one performer.

    All tracked appearances are clustered together, across performers.

    Args:
        credits_data: Per-movie credit records.
        performers: Tracked performer names.
        matcher: Same-identity predicate.

    Returns:
        Representative role label to every appearance of that role.
    """
    groups = cluster_appearances(iter_appearances(credits_data, performers), matcher)

    result: RoleToPerformerAppearances = {}

    for group in groups:
        if len(group.performer_names) > 1:
            result.setdefault(group.label, []).extend(group.members)

    return result


def build_views(
    credits_data: list[MovieCreditsRecord],
    performers: frozenset[str] | set[str],
    matcher: SimilarityMatcher | None = None,
) -> CreditViews:
    """Build all three views into a read-only snapshot.

    Args:
        credits_data: Per-movie credit records.
        performers: Tracked performer names.
        matcher: Same-identity predicate.

    Returns:
        Snapshot with the three views.
    """
    views = CreditViews.freeze(
        performer_titles=build_performer_titles(credits_data, performers),
        performer_role_groups=build_performer_role_groups(credits_data, performers, matcher),
        role_performer_appearances=build_role_performer_appearances(
            credits_data, performers, matcher
        ),
    )

    logger.info(
        "Built views: %d performers, %d multi-role performers, %d recast roles",
        len(views.performer_titles),
        len(views.performer_role_groups),
        len(views.role_performer_appearances),
    )
    return views
