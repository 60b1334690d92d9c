"""Individual ORM - one row per Individual document.

Invariants:
    - id is an opaque uuid4 string generated by the store, immutable after insert
    - document holds the resource fields ({"name", "age"}), never "id"
    - created_at defines listing order

Design Decisions:
    - JSON document column: the table behaves as a flat document collection,
      numbers keep their JSON type (36 stays 36)
    - No secondary indexes beyond the primary key
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from roster.db.base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class IndividualDocument(Base):
    """Persisted Individual document."""
    __tablename__ = "individuals"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=_new_id,
    )
    document: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_record(self) -> dict:
        """Flatten into the public {"id", "name", "age"} shape."""
        return {"id": self.id, **self.document}
