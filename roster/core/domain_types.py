"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - IndividualId wraps the store-generated opaque identifier (a string)
    - All configurable behaviours encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values come straight from environment variables
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

IndividualId = NewType("IndividualId", str)


# ─── Enums ───────────────────────────────────────────────────────

class NotFoundPolicy(str, Enum):
    """How the service answers a lookup/update/delete for an unknown id."""
    ERROR = "error"   # NotFoundError -> 404
    NULL = "null"     # 200 with a JSON null body


class StoreBackend(str, Enum):
    """Persistence backends selectable through settings."""
    SQL = "sql"
    MEMORY = "memory"


class BodyEncoding(str, Enum):
    """Wire encoding of a request body; decides validation strictness."""
    JSON = "json"
    FORM = "form"

    @property
    def strict(self) -> bool:
        # Form values are always text, so they are coerced
        return self is BodyEncoding.JSON
