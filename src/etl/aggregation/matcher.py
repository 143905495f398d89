"""Fuzzy role identity matching.

Decides whether two role labels denote the same character by
combining two complementary rapidfuzz scores:

- token-set ratio: ignores word order and tolerates one label being
  a superset of the other ("Tony Stark" vs "Tony Stark / Iron Man");
- plain ratio: edit-distance similarity over the whole string, which
  rejects a short label that is merely a subset of an unrelated longer
  one ("Hero" vs "Different Hero").

The verdict is symmetric but not transitive.
"""

from dataclasses import dataclass

from rapidfuzz import fuzz, utils

from src.etl.aggregation.normalizer import normalize_role_label

DEFAULT_TOKEN_SET_THRESHOLD = 80
"""Minimum token-set score (0-100)."""

DEFAULT_RATIO_THRESHOLD = 50
"""Minimum plain ratio score (0-100)."""


@dataclass(frozen=True)
class SimilarityScore:
    """Both scores for a pair of normalized labels.

    Attributes:
        token_set: Token-set ratio (0-100).
        ratio: Plain edit-distance ratio (0-100).
    """

    token_set: int
    ratio: int


@dataclass(frozen=True)
class SimilarityMatcher:
    """Same-identity predicate over raw role labels.

    Attributes:
        token_set_threshold: Minimum token-set score to accept.
        ratio_threshold: Minimum plain ratio to accept.
    """

    token_set_threshold: int = DEFAULT_TOKEN_SET_THRESHOLD
    ratio_threshold: int = DEFAULT_RATIO_THRESHOLD

    @classmethod
    def from_settings(cls) -> "SimilarityMatcher":
        """Build a matcher from the configured thresholds."""
        from src.settings import settings

        return cls(
            token_set_threshold=settings.matching.token_set_threshold,
            ratio_threshold=settings.matching.ratio_threshold,
        )

    @staticmethod
    def score(label1: str | None, label2: str | None) -> SimilarityScore | None:
        """Score two labels after normalization.

        Args:
            label1: First raw role label.
            label2: Second raw role label.

        Returns:
            Both scores, or None when either label normalizes to empty.
        """
        clean1 = normalize_role_label(label1)
        clean2 = normalize_role_label(label2)

        if not clean1 or not clean2:
            return None

        token_set = fuzz.token_set_ratio(clean1, clean2, processor=utils.default_process)
        ratio = fuzz.ratio(clean1, clean2, processor=utils.default_process)
        return SimilarityScore(token_set=round(token_set), ratio=round(ratio))

    def is_same_identity(self, label1: str | None, label2: str | None) -> bool:
        """Check if two role labels denote the same character.

        Args:
            label1: First raw role label.
            label2: Second raw role label.

        Returns:
            True if both thresholds are met. Always False when either
            label is empty after normalization.
        """
        scores = self.score(label1, label2)
        if scores is None:
            return False

        return (
            scores.token_set >= self.token_set_threshold
            and scores.ratio >= self.ratio_threshold
        )


_DEFAULT_MATCHER = SimilarityMatcher()


def is_same_identity(label1: str | None, label2: str | None) -> bool:
    """Same-identity check with the default thresholds (80 / 50).

    Args:
        label1: First raw role label.
        label2: Second raw role label.

    Returns:
        True if the labels denote the same character.
    """
    return _DEFAULT_MATCHER.is_same_identity(label1, label2)
