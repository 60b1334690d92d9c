"""Root conftest - shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Importing roster.main never touches a real database file
"""

import os

import pytest
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STORE_BACKEND", "memory")

from roster.infrastructure.database import DatabaseSessionManager  # noqa: E402
from roster.infrastructure.memory_store import InMemoryIndividualStore  # noqa: E402
from roster.infrastructure.sql_store import SqlIndividualStore  # noqa: E402


@pytest.fixture
async def db_manager():
    # StaticPool: one connection, so the in-memory schema outlives each session
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def sql_store(db_manager):
    return SqlIndividualStore(db_manager)


@pytest.fixture
def memory_store():
    return InMemoryIndividualStore()
