"""Credit aggregation endpoints for REST API.

Serves the three aggregated views of the tracked Marvel catalog.
Upstream failures are reported as 503 instead of crashing the process.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.schemas import (
    ActorsWithMultipleCharactersResponse,
    CharactersWithMultipleActorsResponse,
    ErrorResponse,
    MoviesPerActorResponse,
    to_actors_with_multiple_characters,
    to_characters_with_multiple_actors,
)
from src.etl.utils.logger import setup_logger
from src.services.credits.credit_service import CreditService, get_credit_service

logger = setup_logger("api.credits")

router = APIRouter(
    tags=["Credits"],
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse}},
)

CreditServiceDep = Annotated[CreditService, Depends(get_credit_service)]

_UNAVAILABLE_DETAIL = "Failed to fetch movie data"


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.get(
    "/moviesPerActor",
    response_model=MoviesPerActorResponse,
    summary="Movies per actor",
    description="Which tracked movies each tracked actor played in.",
)
async def get_movies_per_actor(service: CreditServiceDep) -> MoviesPerActorResponse:
    """Get the movies each actor appeared in.

    Args:
        service: Credit aggregation service.

    Returns:
        Actor name to movie titles.

    Raises:
        HTTPException: 503 if upstream credits cannot be fetched.
    """
    try:
        data = await service.get_movies_per_actor()
    except Exception as e:
        logger.exception("Error in get_movies_per_actor")
        raise _unavailable() from e
    return dict(data)


@router.get(
    "/actorsWithMultipleCharacters",
    response_model=ActorsWithMultipleCharactersResponse,
    summary="Actors with multiple characters",
    description="Actors who played more than one distinct character.",
)
async def get_actors_with_multiple_characters(
    service: CreditServiceDep,
) -> ActorsWithMultipleCharactersResponse:
    """Get actors who played more than one character.

    Args:
        service: Credit aggregation service.

    Returns:
        Actor name to one appearance per distinct character.

    Raises:
        HTTPException: 503 if upstream credits cannot be fetched.
    """
    try:
        data = await service.get_actors_with_multiple_characters()
    except Exception as e:
        logger.exception("Error in get_actors_with_multiple_characters")
        raise _unavailable() from e
    return to_actors_with_multiple_characters(data)


@router.get(
    "/charactersWithMultipleActors",
    response_model=CharactersWithMultipleActorsResponse,
    summary="Characters with multiple actors",
    description="Characters that were played by more than one actor.",
)
async def get_characters_with_multiple_actors(
    service: CreditServiceDep,
) -> CharactersWithMultipleActorsResponse:
    """Get characters played by more than one actor.

    Args:
        service: Credit aggregation service.

    Returns:
        Character label to every appearance of that character.

    Raises:
        HTTPException: 503 if upstream credits cannot be fetched.
    """
    try:
        data = await service.get_characters_with_multiple_actors()
    except Exception as e:
        logger.exception("Error in get_characters_with_multiple_actors")
        raise _unavailable() from e
    return to_characters_with_multiple_actors(data)


# =============================================================================
# HELPERS
# =============================================================================


def _unavailable() -> HTTPException:
    """Build the 503 raised when upstream data is unavailable."""
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=_UNAVAILABLE_DETAIL,
    )
