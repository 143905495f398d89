"""Shared fixtures for integration tests.

Uses the module-level ``app`` from ``src.api.main`` with the credit
service dependency overridden, so no request reaches TMDB.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.services.credits.credit_service import CreditService, get_credit_service


# ---------------------------------------------------------------------------
# Auto-mark all tests in this directory as "integration"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def credit_service(mock_credits_source, marvel_movies, marvel_actors) -> CreditService:
    """Credit service backed by the mocked credits source."""
    return CreditService(
        credits_source=mock_credits_source,
        movies=marvel_movies,
        actors=marvel_actors,
    )


@pytest.fixture
async def client(credit_service: CreditService) -> AsyncGenerator[AsyncClient, None]:
    """Provide an ``httpx.AsyncClient`` wired to the real app.

    ``get_credit_service`` is overridden with ``credit_service``.
    """
    from src.api.main import app

    app.dependency_overrides[get_credit_service] = lambda: credit_service
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.pop(get_credit_service, None)
