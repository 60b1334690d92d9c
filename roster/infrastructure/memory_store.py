"""In-Memory Individual Store - dict-backed IndividualStore.

Invariants:
    - list_all returns records in insertion order
    - Stored and returned dicts are copies; callers cannot mutate store state
    - State lives for the lifetime of the instance only

Design Decisions:
    - Used for STORE_BACKEND=memory and for service-level tests
"""

import uuid

from roster.core.domain_types import IndividualId


class InMemoryIndividualStore:
    """Process-local implementation of IndividualStore."""

    def __init__(self):
        self._documents: dict[str, dict] = {}

    async def create(self, record: dict) -> dict:
        individual_id = str(uuid.uuid4())
        self._documents[individual_id] = dict(record)
        return self._record(individual_id)

    async def list_all(self) -> list[dict]:
        return [self._record(i) for i in self._documents]

    async def get_by_id(self, individual_id: IndividualId) -> dict | None:
        if individual_id not in self._documents:
            return None
        return self._record(individual_id)

    async def update_by_id(
        self, individual_id: IndividualId, patch: dict,
    ) -> dict | None:
        if individual_id not in self._documents:
            return None
        self._documents[individual_id].update(patch)
        return self._record(individual_id)

    async def delete_by_id(self, individual_id: IndividualId) -> dict | None:
        document = self._documents.pop(individual_id, None)
        if document is None:
            return None
        return {"id": individual_id, **document}

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._documents.clear()

    def _record(self, individual_id: str) -> dict:
        return {"id": individual_id, **self._documents[individual_id]}
