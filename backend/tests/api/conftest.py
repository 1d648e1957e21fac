"""API test fixtures: FastAPI app instance + async test client.

Invariants:
    - Every test gets a fresh app from create_app()
    - Server-side exceptions are turned into responses, not re-raised into the test
    - No network and no lifespan: httpx ASGITransport calls the app directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app


def _client(app) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    async with _client(app) as c:
        yield c


@pytest.fixture
def client_for():
    """Client factory for an app built with specific Settings."""
    return lambda settings: _client(create_app(settings))
