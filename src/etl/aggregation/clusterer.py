"""Greedy identity clustering.

Partitions appearances into identity groups in a single pass:
each incoming label is compared against the leader label of every
existing group, in creation order, and joins the first group that
matches. Unmatched labels open a new group.

Groupings are never revisited and a group's label never changes, so
with a non-transitive matcher the result depends on input order.
"""

import logging
from collections.abc import Iterable

from src.etl.aggregation.matcher import SimilarityMatcher
from src.etl.aggregation.schemas import Appearance, IdentityGroup

logger = logging.getLogger(__name__)


class IdentityClusterer:
    """Incremental first-match-wins clusterer.

    Attributes:
        groups: Identity groups in creation order.
    """

    def __init__(self, matcher: SimilarityMatcher | None = None) -> None:
        """Initialize clusterer.

        Args:
            matcher: Same-identity predicate. Defaults to 80 / 50 thresholds.
        """
        self._matcher = matcher or SimilarityMatcher()
        self._leader_labels: list[str] = []
        self.groups: list[IdentityGroup] = []

    def add(self, appearance: Appearance, label: str) -> IdentityGroup:
        """Place one appearance into a group.

        Args:
            appearance: Appearance to place.
            label: Label compared against group leaders.

        Returns:
            The group the appearance joined or opened.
        """
        for leader_label, group in zip(self._leader_labels, self.groups):
            if self._matcher.is_same_identity(leader_label, label):
                group.add(appearance)
                return group

        group = IdentityGroup(members=[appearance])
        self.groups.append(group)
        self._leader_labels.append(label)
        return group


def cluster(
    pairs: Iterable[tuple[Appearance, str]],
    matcher: SimilarityMatcher | None = None,
) -> list[IdentityGroup]:
    """Partition (appearance, label) pairs into identity groups.

    Args:
        pairs: Appearances with the label to compare, in input order.
        matcher: Same-identity predicate.

    Returns:
        Non-empty identity groups in creation order.
    """
    clusterer = IdentityClusterer(matcher)
    count = 0
    for appearance, label in pairs:
        clusterer.add(appearance, label)
        count += 1

    logger.debug("Clustered %d appearances into %d groups", count, len(clusterer.groups))
    return clusterer.groups


def cluster_appearances(
    appearances: Iterable[Appearance],
    matcher: SimilarityMatcher | None = None,
) -> list[IdentityGroup]:
    """Cluster appearances by their own role label.

    Args:
        appearances: Appearances in input order.
        matcher: Same-identity predicate.

    Returns:
        Identity groups in creation order.
    """
    return cluster(((a, a.role_label) for a in appearances), matcher)
