"""Fixtures pytest partagées."""

import os

os.environ.setdefault("LOG_TO_FILE", "false")

from typing import Any  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402

from src.etl.types import MovieCreditsRecord  # noqa: E402


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock variables env pour tests reproductibles."""
    # TMDB settings
    monkeypatch.setenv("TMDB_API_KEY", "test_api_key_12345678901234567890")
    monkeypatch.setenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
    monkeypatch.setenv("TMDB_LANGUAGE", "en-US")

    # Matching settings
    monkeypatch.setenv("MATCH_TOKEN_SET_THRESHOLD", "80")
    monkeypatch.setenv("MATCH_RATIO_THRESHOLD", "50")

    # CORS settings
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000")

    # Environment
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_TO_FILE", "false")


@pytest.fixture
def sample_credits() -> list[MovieCreditsRecord]:
    """Crédits factices : trois films, rôles répétés et reformulés."""
    return [
        {
            "movie_name": "Movie A",
            "credits": {
                "cast": [
                    {"name": "Actor One", "character": "Hero"},
                    {"name": "Actor Two", "character": "Villain"},
                    {"name": "Actor Three", "character": "Sidekick"},
                ]
            },
        },
        {
            "movie_name": "Movie B",
            "credits": {
                "cast": [
                    {"name": "Actor One", "character": "Different Hero"},
                    {"name": "Actor Two", "character": "Villain"},
                    {"name": "Actor Four", "character": "New Character"},
                ]
            },
        },
        {
            "movie_name": "Movie C",
            "credits": {
                "cast": [
                    {"name": "Actor One", "character": "Hero"},
                    {"name": "Actor Five", "character": "Hero"},
                ]
            },
        },
    ]


@pytest.fixture
def sample_performers() -> frozenset[str]:
    """Acteurs suivis pour ``sample_credits``."""
    return frozenset({"Actor One", "Actor Two", "Actor Five"})


@pytest.fixture
def marvel_credits() -> list[MovieCreditsRecord]:
    """Réponse TMDB factice pour trois films Marvel."""
    return [
        {
            "movie_name": "Iron Man",
            "credits": {
                "cast": [
                    {"name": "Robert Downey Jr.", "character": "Tony Stark / Iron Man"},
                    {"name": "Gwyneth Paltrow", "character": "Pepper Potts"},
                ]
            },
        },
        {
            "movie_name": "The Avengers",
            "credits": {
                "cast": [
                    {"name": "Robert Downey Jr.", "character": "Tony Stark / Iron Man"},
                    {"name": "Chris Evans", "character": "Steve Rogers / Captain America"},
                    {"name": "Scarlett Johansson", "character": "Natasha Romanoff / Black Widow"},
                ]
            },
        },
        {
            "movie_name": "Fantastic Four",
            "credits": {
                "cast": [
                    {"name": "Chris Evans", "character": "Johnny Storm / Human Torch"},
                ]
            },
        },
    ]


@pytest.fixture
def marvel_movies() -> dict[str, int]:
    """Catalogue factice : titres -> IDs TMDB."""
    return {
        "Iron Man": 1726,
        "The Avengers": 24428,
        "Fantastic Four": 9738,
    }


@pytest.fixture
def marvel_actors() -> list[str]:
    """Acteurs suivis pour ``marvel_credits``."""
    return [
        "Robert Downey Jr.",
        "Chris Evans",
        "Gwyneth Paltrow",
        "Scarlett Johansson",
    ]


@pytest.fixture
def mock_credits_source(marvel_credits: list[MovieCreditsRecord]) -> Any:
    """Source de crédits mockée (remplace TMDBClient)."""
    source = AsyncMock()
    source.get_all_movies_credits = AsyncMock(return_value=marvel_credits)
    return source
