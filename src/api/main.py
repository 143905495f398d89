"""FastAPI application entry point.

Creates and configures the CastGraph REST API serving the
aggregated cast credit views, health check and Prometheus metrics.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routers import credits
from src.api.schemas import HealthResponse
from src.etl.utils.logger import setup_logger
from src.monitoring.middleware import PrometheusMiddleware, mount_metrics
from src.services.credits.credit_service import CreditService, get_credit_service
from src.settings import get_masked_settings, settings

logger = setup_logger("api.main")

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Logs the effective configuration on startup.

    Args:
        _app: FastAPI application instance.

    Yields:
        None after startup tasks complete.
    """
    _log_startup_configuration()
    yield


def _log_startup_configuration() -> None:
    """Log masked settings and warn when TMDB is not configured."""
    logger.info("Starting %s in %s environment", settings.api.title, settings.environment)
    logger.debug("Configuration: %s", get_masked_settings())
    if not settings.tmdb.is_configured:
        logger.warning("TMDB_API_KEY is not set; credit endpoints will answer 503")


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="Aggregated cast credits for the tracked Marvel catalog",
        lifespan=lifespan,
        debug=settings.debug,
    )
    _configure_cors(app)
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)
    _register_routers(app)
    return app


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )


def _register_routers(app: FastAPI) -> None:
    """Register API routers.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(credits.router)


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================

app = create_app()


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check",
    description="Verify API is running and report the credits cache state.",
)
def health_check(
    service: Annotated[CreditService, Depends(get_credit_service)],
) -> HealthResponse:
    """Health check endpoint.

    Does not trigger an upstream fetch.

    Args:
        service: Credit aggregation service.

    Returns:
        API status with version and cache state.
    """
    return HealthResponse(
        status="healthy",
        version=settings.api.version,
        data_state=service.data_state.value,
        tmdb_configured=settings.tmdb.is_configured,
    )


# =============================================================================
# CLI ENTRY POINT
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.reload_enabled,
    )
