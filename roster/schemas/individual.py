"""Individual Schemas - the Resource Model, validated at the API boundary.

Invariants:
    - IndividualCreate.name: 1-200 chars, not blank, kept exactly as given
    - IndividualCreate.age: finite number >= 0
    - Unknown fields are rejected (extra="forbid"), never silently dropped
    - IndividualPatch accepts any subset of fields but never an explicit null
    - JSON bodies validate strictly; form bodies (all text) are coerced

Design Decisions:
    - int | float for age: a JSON 36 comes back as 36, not 36.0
    - parse_* helpers translate pydantic errors into the domain ValidationError
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, Field, StringConstraints,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from roster.core.domain_types import BodyEncoding
from roster.core.errors import ValidationError


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("name must contain a non-whitespace character")
    return v


Name = Annotated[
    str,
    StringConstraints(min_length=1, max_length=200),
    AfterValidator(_not_blank),
]
Age = (
    Annotated[int, Field(ge=0)]
    | Annotated[float, Field(ge=0, allow_inf_nan=False)]
)


class IndividualCreate(BaseModel):
    """Create payload - both fields required."""
    model_config = ConfigDict(extra="forbid")

    name: Name
    age: Age


class IndividualPatch(BaseModel):
    """Update payload - any subset of fields, none of them null."""
    model_config = ConfigDict(extra="forbid")

    name: Name | None = None
    age: Age | None = None

    @field_validator("name", "age", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("field may be omitted but not null")
        return v


class Individual(BaseModel):
    """Individual response - public-facing record."""
    id: str
    name: str
    age: int | float


def _error_details(exc: PydanticValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def parse_create(data: Any, encoding: BodyEncoding = BodyEncoding.JSON) -> dict:
    """Validate a create body; return the clean record or raise ValidationError."""
    try:
        model = IndividualCreate.model_validate(
            _as_dict(data), strict=encoding.strict,
        )
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid individual", details=_error_details(e),
        ) from e
    return model.model_dump()


def parse_patch(data: Any, encoding: BodyEncoding = BodyEncoding.JSON) -> dict:
    """Validate an update body; return only the fields that were supplied."""
    try:
        model = IndividualPatch.model_validate(
            _as_dict(data), strict=encoding.strict,
        )
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid individual patch", details=_error_details(e),
        ) from e
    return model.model_dump(exclude_unset=True)


def _as_dict(data: Any) -> Any:
    # Strict mode only accepts real dicts; other shapes fail as model_type
    if isinstance(data, Mapping) and not isinstance(data, dict):
        return dict(data)
    return data
