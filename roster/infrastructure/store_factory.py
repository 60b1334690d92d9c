"""Store Factory - builds the configured IndividualStore once per process.

Invariants:
    - Called from the FastAPI lifespan before serving begins
    - The returned store owns its resources; close() releases them
"""

import logging

from roster.config import Settings
from roster.core.domain_types import StoreBackend
from roster.core.repository_protocols import IndividualStore
from roster.infrastructure.database import DatabaseSessionManager
from roster.infrastructure.memory_store import InMemoryIndividualStore
from roster.infrastructure.sql_store import SqlIndividualStore

logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> IndividualStore:
    """Construct the store selected by settings.store_backend."""
    if settings.store_backend is StoreBackend.MEMORY:
        logger.info("Using in-memory store")
        return InMemoryIndividualStore()

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db_manager.create_schema()
    logger.info("Using SQL store")
    return SqlIndividualStore(db_manager)
