"""Cast credit aggregation module.

This module resolves role-name identities with fuzzy matching and
reduces raw per-movie cast lists into the three derived views.

Example:
    >>> from src.etl.aggregation import build_views
    >>> views = build_views(credits_data, frozenset({"Chris Evans"}))
    >>> views.performer_role_groups["Chris Evans"]
"""

from src.etl.aggregation.clusterer import IdentityClusterer, cluster, cluster_appearances
from src.etl.aggregation.matcher import (
    DEFAULT_RATIO_THRESHOLD,
    DEFAULT_TOKEN_SET_THRESHOLD,
    SimilarityMatcher,
    SimilarityScore,
    is_same_identity,
)
from src.etl.aggregation.normalizer import normalize_role_label
from src.etl.aggregation.schemas import Appearance, CreditViews, IdentityGroup
from src.etl.aggregation.views import (
    build_performer_role_groups,
    build_performer_titles,
    build_role_performer_appearances,
    build_views,
    iter_appearances,
)

__all__ = [
    # Normalization and matching
    "normalize_role_label",
    "SimilarityMatcher",
    "SimilarityScore",
    "is_same_identity",
    "DEFAULT_TOKEN_SET_THRESHOLD",
    "DEFAULT_RATIO_THRESHOLD",
    # Clustering
    "IdentityClusterer",
    "cluster",
    "cluster_appearances",
    # Views
    "iter_appearances",
    "build_performer_titles",
    "build_performer_role_groups",
    "build_role_performer_appearances",
    "build_views",
    # Schemas
    "Appearance",
    "IdentityGroup",
    "CreditViews",
]
