"""SQL Individual Store - IndividualStore backed by a SQLAlchemy document table.

Invariants:
    - Each call runs in its own session: single-document, single-operation
    - update_by_id locks the row for its read-merge-write (FOR UPDATE on
      server databases, BEGIN IMMEDIATE on SQLite), so concurrent patches on
      one id never drop each other's fields
    - id is assigned on insert and never rewritten by update
    - list_all orders by created_at, then id
    - delete_by_id returns the record as it was immediately before removal
    - Failures leave as StoreError (mapped by DatabaseSessionManager.session)

Design Decisions:
    - Patch merged into a fresh dict: JSON columns only track reassignment
"""

import logging

from sqlalchemy import select

from roster.core.domain_types import IndividualId
from roster.infrastructure.database import DatabaseSessionManager
from roster.models.individual import IndividualDocument

logger = logging.getLogger(__name__)


class SqlIndividualStore:
    """Document-table implementation of IndividualStore."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def create(self, record: dict) -> dict:
        async with self._db.session() as db:
            row = IndividualDocument(document=dict(record))
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return row.to_record()

    async def list_all(self) -> list[dict]:
        async with self._db.session() as db:
            result = await db.execute(
                select(IndividualDocument).order_by(
                    IndividualDocument.created_at, IndividualDocument.id,
                ),
            )
            return [row.to_record() for row in result.scalars().all()]

    async def get_by_id(self, individual_id: IndividualId) -> dict | None:
        async with self._db.session() as db:
            row = await db.get(IndividualDocument, individual_id)
            return row.to_record() if row else None

    async def update_by_id(
        self, individual_id: IndividualId, patch: dict,
    ) -> dict | None:
        async with self._db.session() as db:
            row = await db.get(
                IndividualDocument, individual_id, with_for_update=True,
            )
            if row is None:
                return None
            row.document = {**row.document, **patch}
            await db.commit()
            return row.to_record()

    async def delete_by_id(self, individual_id: IndividualId) -> dict | None:
        async with self._db.session() as db:
            row = await db.get(IndividualDocument, individual_id)
            if row is None:
                return None
            snapshot = row.to_record()
            await db.delete(row)
            await db.commit()
            return snapshot

    async def ping(self) -> bool:
        return await self._db.health_check()

    async def close(self) -> None:
        await self._db.dispose()
        logger.info("SQL store closed")
