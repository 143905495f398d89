"""Pydantic schemas for API responses.

Wire shapes use camelCase keys (``movieName``, ``characterName``,
``actorName``) for existing consumers of the endpoints.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from src.etl.aggregation import Appearance, CreditViews

# =============================================================================
# HEALTH
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    data_state: str = Field(examples=["cached"], description="empty, fetching or cached")
    tmdb_configured: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# =============================================================================
# CREDITS
# =============================================================================


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CharacterAppearance(_CamelModel):
    """One distinct role of a performer (representative appearance)."""

    movie_name: str = Field(examples=["The Avengers"])
    character_name: str = Field(examples=["Steve Rogers / Captain America"])

    @classmethod
    def from_appearance(cls, appearance: Appearance) -> "CharacterAppearance":
        """Project an Appearance onto the per-performer wire shape."""
        return cls(movie_name=appearance.movie_title, character_name=appearance.role_label)


class ActorAppearance(_CamelModel):
    """One performer's appearance in a shared role."""

    movie_name: str = Field(examples=["Iron Man"])
    actor_name: str = Field(examples=["Terrence Howard"])

    @classmethod
    def from_appearance(cls, appearance: Appearance) -> "ActorAppearance":
        """Project an Appearance onto the per-role wire shape."""
        return cls(movie_name=appearance.movie_title, actor_name=appearance.performer_name)


MoviesPerActorResponse = dict[str, list[str]]
ActorsWithMultipleCharactersResponse = dict[str, list[CharacterAppearance]]
CharactersWithMultipleActorsResponse = dict[str, list[ActorAppearance]]


class ErrorResponse(BaseModel):
    """Error payload returned when upstream data is unavailable."""

    detail: str = Field(examples=["Failed to fetch movie data"])


# =============================================================================
# VIEW PROJECTIONS
# =============================================================================

_ROLE_GROUPS_ADAPTER = TypeAdapter(ActorsWithMultipleCharactersResponse)
_SHARED_ROLES_ADAPTER = TypeAdapter(CharactersWithMultipleActorsResponse)


def to_actors_with_multiple_characters(
    role_groups: Mapping[str, Sequence[Appearance]],
) -> ActorsWithMultipleCharactersResponse:
    """Project performer role groups onto the wire shape."""
    return {
        actor: [CharacterAppearance.from_appearance(a) for a in appearances]
        for actor, appearances in role_groups.items()
    }


def to_characters_with_multiple_actors(
    role_appearances: Mapping[str, Sequence[Appearance]],
) -> CharactersWithMultipleActorsResponse:
    """Project shared-role appearances onto the wire shape."""
    return {
        character: [ActorAppearance.from_appearance(a) for a in appearances]
        for character, appearances in role_appearances.items()
    }


def views_payload(views: CreditViews) -> dict[str, Any]:
    """All three views as JSON-ready data, keyed by endpoint name."""
    role_groups = to_actors_with_multiple_characters(views.performer_role_groups)
    shared_roles = to_characters_with_multiple_actors(views.role_performer_appearances)

    return {
        "moviesPerActor": dict(views.performer_titles),
        "actorsWithMultipleCharacters": _ROLE_GROUPS_ADAPTER.dump_python(
            role_groups, by_alias=True
        ),
        "charactersWithMultipleActors": _SHARED_ROLES_ADAPTER.dump_python(
            shared_roles, by_alias=True
        ),
    }
