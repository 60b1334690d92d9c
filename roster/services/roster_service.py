"""Roster Service - translates roster requests into IndividualStore calls.

Invariants:
    - Stateless: holds only the injected store and the not-found policy
    - Validation (schemas/individual.py) runs before any store call; a rejected
      create/update never reaches the store
    - Unknown ids follow NotFoundPolicy: ERROR raises NotFoundError, NULL returns None
    - Any non-RosterError raised by the store is wrapped in StoreError

Design Decisions:
    - Body encoding passed in by the route: JSON validates strictly, forms coerce
    - No multi-document operations, so no locking or transactions here
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from roster.core.domain_types import BodyEncoding, IndividualId, NotFoundPolicy
from roster.core.errors import NotFoundError, RosterError, StoreError
from roster.core.repository_protocols import IndividualStore
from roster.schemas.individual import parse_create, parse_patch

logger = logging.getLogger(__name__)


class RosterService:
    """CRUD orchestration for Individual records."""

    def __init__(
        self,
        store: IndividualStore,
        not_found_policy: NotFoundPolicy = NotFoundPolicy.ERROR,
    ):
        self.store = store
        self.not_found_policy = not_found_policy

    async def list_all(self) -> list[dict]:
        async with _store_call("list"):
            return await self.store.list_all()

    async def get(self, individual_id: IndividualId) -> dict | None:
        async with _store_call("get"):
            record = await self.store.get_by_id(individual_id)
        return self._found_or_policy(record, individual_id)

    async def create(
        self, data: Any, encoding: BodyEncoding = BodyEncoding.JSON,
    ) -> dict:
        record = parse_create(data, encoding)
        async with _store_call("create"):
            created = await self.store.create(record)
        logger.info(
            "Individual created", extra={"individual_id": created["id"]},
        )
        return created

    async def update(
        self,
        individual_id: IndividualId,
        data: Any,
        encoding: BodyEncoding = BodyEncoding.JSON,
    ) -> dict | None:
        patch = parse_patch(data, encoding)
        async with _store_call("update"):
            updated = await self.store.update_by_id(individual_id, patch)
        if updated is not None:
            logger.info(
                "Individual updated", extra={"individual_id": individual_id},
            )
        return self._found_or_policy(updated, individual_id)

    async def delete(self, individual_id: IndividualId) -> dict | None:
        async with _store_call("delete"):
            deleted = await self.store.delete_by_id(individual_id)
        if deleted is not None:
            logger.info(
                "Individual deleted", extra={"individual_id": individual_id},
            )
        return self._found_or_policy(deleted, individual_id)

    def _found_or_policy(
        self, record: dict | None, individual_id: IndividualId,
    ) -> dict | None:
        if record is None and self.not_found_policy is NotFoundPolicy.ERROR:
            raise NotFoundError(individual_id)
        return record


@asynccontextmanager
async def _store_call(operation: str):
    """Wrap foreign store exceptions; RosterErrors pass through untouched."""
    try:
        yield
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Store {operation} raised {type(e).__name__}: {e}")
        raise StoreError(str(e), operation) from e
