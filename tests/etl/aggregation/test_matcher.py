"""Unit tests for fuzzy role identity matching."""

import itertools

import pytest

from src.etl.aggregation.matcher import (
    DEFAULT_RATIO_THRESHOLD,
    DEFAULT_TOKEN_SET_THRESHOLD,
    SimilarityMatcher,
    is_same_identity,
)

LABELS = [
    "Hero",
    "Different Hero",
    "Villain",
    "Tony Stark",
    "Tony Stark / Iron Man",
    "Iron Man",
    "Steve Rogers / Captain America",
    "Captain America / Steve Rogers",
    "Steve Rogers (uncredited)",
    "Johnny Storm / Human Torch",
    "(voice)",
    "",
]


class TestIsSameIdentity:
    @staticmethod
    def test_reordered_tokens_match() -> None:
        assert is_same_identity(
            "Steve Rogers / Captain America",
            "Captain America / Steve Rogers",
        )

    @staticmethod
    def test_short_subset_of_unrelated_label_rejected() -> None:
        assert not is_same_identity("Hero", "Different Hero")

    @staticmethod
    def test_superset_label_matches() -> None:
        assert is_same_identity("Tony Stark", "Tony Stark / Iron Man")

    @staticmethod
    def test_identical_labels_match() -> None:
        assert is_same_identity("Villain", "Villain")

    @staticmethod
    def test_case_insensitive() -> None:
        assert is_same_identity("Pepper Potts", "pepper potts")

    @staticmethod
    def test_parenthetical_ignored() -> None:
        assert is_same_identity("Steve Rogers (uncredited)", "Steve Rogers")

    @staticmethod
    def test_different_characters_rejected() -> None:
        assert not is_same_identity(
            "Steve Rogers / Captain America",
            "Johnny Storm / Human Torch",
        )

    @staticmethod
    @pytest.mark.parametrize("other", ["Hero", "", "(uncredited)"])
    def test_empty_after_normalization_never_matches(other: str) -> None:
        assert not is_same_identity("(uncredited)", other)
        assert not is_same_identity(None, other)

    @staticmethod
    @pytest.mark.parametrize("label1,label2", list(itertools.combinations(LABELS, 2)))
    def test_symmetric(label1: str, label2: str) -> None:
        assert is_same_identity(label1, label2) == is_same_identity(label2, label1)

    @staticmethod
    def test_not_transitive() -> None:
        assert is_same_identity("Tony Stark", "Tony Stark / Iron Man")
        assert is_same_identity("Tony Stark / Iron Man", "Iron Man")
        assert not is_same_identity("Tony Stark", "Iron Man")


class TestSimilarityMatcher:
    @staticmethod
    def test_default_thresholds() -> None:
        matcher = SimilarityMatcher()
        assert matcher.token_set_threshold == DEFAULT_TOKEN_SET_THRESHOLD == 80
        assert matcher.ratio_threshold == DEFAULT_RATIO_THRESHOLD == 50

    @staticmethod
    def test_identical_strings_score_100() -> None:
        score = SimilarityMatcher.score("Natasha Romanoff", "Natasha Romanoff")
        assert score is not None
        assert score.token_set == 100
        assert score.ratio == 100

    @staticmethod
    def test_token_reordering_keeps_token_set_score() -> None:
        score = SimilarityMatcher.score("Bruce Banner Hulk", "Hulk Bruce Banner")
        assert score is not None
        assert score.token_set == 100

    @staticmethod
    def test_score_none_for_empty_label() -> None:
        assert SimilarityMatcher.score("", "Hero") is None

    @staticmethod
    def test_lower_ratio_threshold_accepts_subset() -> None:
        lenient = SimilarityMatcher(ratio_threshold=0)
        assert lenient.is_same_identity("Hero", "Different Hero")

    @staticmethod
    def test_from_settings_uses_configured_thresholds(monkeypatch) -> None:
        from src.settings import settings

        monkeypatch.setattr(settings.matching, "token_set_threshold", 90)
        monkeypatch.setattr(settings.matching, "ratio_threshold", 60)

        matcher = SimilarityMatcher.from_settings()

        assert matcher.token_set_threshold == 90
        assert matcher.ratio_threshold == 60
