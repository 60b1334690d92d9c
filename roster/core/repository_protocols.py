"""Boundary Protocols - contract between the service and persistence backends.

Invariants:
    - The service never imports a concrete store, only this Protocol
    - Unknown ids are reported by returning None; policy belongs to the service
    - Returned records are plain dicts: {"id", "name", "age"}

Design Decisions:
    - Protocol over ABC: structural subtyping, backends share no base class
    - Async methods: implementations do IO and suspend only while awaiting it
"""

from typing import Protocol

from roster.core.domain_types import IndividualId


class IndividualStore(Protocol):
    """Contract for Individual persistence, implemented by infrastructure/."""
    async def create(self, record: dict) -> dict: ...
    async def list_all(self) -> list[dict]: ...
    async def get_by_id(self, individual_id: IndividualId) -> dict | None: ...
    async def update_by_id(
        self, individual_id: IndividualId, patch: dict,
    ) -> dict | None: ...
    async def delete_by_id(self, individual_id: IndividualId) -> dict | None: ...
    async def ping(self) -> bool: ...
    async def close(self) -> None: ...
