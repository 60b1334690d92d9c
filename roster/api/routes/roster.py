"""Roster Routes - the five CRUD endpoints for Individual records.

Invariants:
    - GET /roster, GET/PUT/DELETE /roster/{id}, POST /roster
    - POST answers 201 with the stored record (id included); others answer 200
    - Bodies may be JSON or form-encoded (see api/dependencies.read_body)
    - Unknown ids answer 404, or 200 + null under NotFoundPolicy.NULL

Design Decisions:
    - Routes only translate HTTP to RosterService calls; logging lives in the
      request observer middleware, not in each handler
"""

from fastapi import APIRouter, Depends, status

from roster.api.dependencies import RequestBody, get_roster_service, read_body
from roster.core.domain_types import IndividualId
from roster.schemas.individual import Individual
from roster.services.roster_service import RosterService

router = APIRouter(prefix="/roster", tags=["roster"])


@router.get("", response_model=list[Individual])
async def list_individuals(
    service: RosterService = Depends(get_roster_service),
):
    """Every Individual, in store order."""
    return await service.list_all()


@router.get("/{individual_id}", response_model=Individual | None)
async def get_individual(
    individual_id: str,
    service: RosterService = Depends(get_roster_service),
):
    return await service.get(IndividualId(individual_id))


@router.post(
    "", response_model=Individual, status_code=status.HTTP_201_CREATED,
)
async def create_individual(
    body: RequestBody = Depends(read_body),
    service: RosterService = Depends(get_roster_service),
):
    """Create an Individual from name and age; the store assigns the id."""
    return await service.create(body.data, body.encoding)


@router.put("/{individual_id}", response_model=Individual | None)
async def update_individual(
    individual_id: str,
    body: RequestBody = Depends(read_body),
    service: RosterService = Depends(get_roster_service),
):
    """Merge any subset of name/age onto an existing Individual."""
    return await service.update(
        IndividualId(individual_id), body.data, body.encoding,
    )


@router.delete("/{individual_id}", response_model=Individual | None)
async def delete_individual(
    individual_id: str,
    service: RosterService = Depends(get_roster_service),
):
    """Remove an Individual and return it as it was before removal."""
    return await service.delete(IndividualId(individual_id))
