"""API test fixtures — FastAPI app over httpx ASGITransport.

Invariants:
    - `client` runs the app lifespan, so the catalog is seeded as in production
    - `cold_client` skips the lifespan, leaving the catalog uninitialized

Design Decisions:
    - ASGITransport does not drive lifespan events; the fixture enters
      app.router.lifespan_context explicitly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from demo_api.main import app


@pytest.fixture
async def client():
    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def cold_client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
