"""API Dependencies - service lookup and request-body decoding for routes.

Invariants:
    - Store and service are created once in the lifespan and read from app.state
    - Bodies decode to (data, encoding); undecodable bodies raise ValidationError
    - Only application/json and form media types are accepted

Design Decisions:
    - Body read by hand instead of a pydantic parameter: one route accepts both
      JSON and form encodings, and validation errors stay in the domain hierarchy
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Request

from roster.core.domain_types import BodyEncoding
from roster.core.errors import ValidationError
from roster.core.repository_protocols import IndividualStore
from roster.services.roster_service import RosterService

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPES = frozenset({
    "application/x-www-form-urlencoded",
    "multipart/form-data",
})


@dataclass(frozen=True)
class RequestBody:
    """Decoded request body plus the encoding it arrived in."""
    data: Any
    encoding: BodyEncoding


def get_store(request: Request) -> IndividualStore:
    return request.app.state.store


def get_roster_service(request: Request) -> RosterService:
    return request.app.state.roster_service


async def read_body(request: Request) -> RequestBody:
    """Decode a JSON or form-encoded body."""
    media_type = (
        request.headers.get("content-type", "").split(";")[0].strip().lower()
    )
    if media_type in FORM_MEDIA_TYPES:
        form = await request.form()
        # Uploaded files carry no Individual fields
        data = {k: v for k, v in form.items() if isinstance(v, str)}
        return RequestBody(data, BodyEncoding.FORM)
    if media_type != JSON_MEDIA_TYPE:
        raise ValidationError(f"Unsupported content type: {media_type or 'none'}")
    try:
        data = await request.json()
    except ValueError as e:
        raise ValidationError("Request body is not valid JSON") from e
    return RequestBody(data, BodyEncoding.JSON)
