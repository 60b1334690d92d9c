"""API test fixtures - FastAPI app wired to an in-memory SQLite store.

Invariants:
    - get_roster_service / get_store overridden per test; lifespan not run
    - overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roster.api.dependencies import get_roster_service, get_store
from roster.core.domain_types import NotFoundPolicy
from roster.main import app
from roster.services.roster_service import RosterService


@pytest.fixture
def make_client():
    """Build a client around any store/service pair."""
    async def _make(store, service=None):
        service = service or RosterService(store)
        app.dependency_overrides[get_store] = lambda: store
        app.dependency_overrides[get_roster_service] = lambda: service
        return AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        )

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
async def client(make_client, sql_store):
    c = await make_client(sql_store)
    async with c:
        yield c


@pytest.fixture
async def null_client(make_client, sql_store):
    c = await make_client(
        sql_store, RosterService(sql_store, NotFoundPolicy.NULL),
    )
    async with c:
        yield c
