"""Task ORM — the single persisted entity of the checklist service.

Invariants:
    - id is UUID primary key, assigned in Python at insert time, never updated
    - title is non-nullable text; content defaults to empty string
    - done defaults to False; the store only ever sets it to True
    - created_at is assigned once at insert (UTC)

Design Decisions:
    - Generic Uuid type over postgresql.UUID: native uuid on PostgreSQL,
      CHAR(32) on SQLite for the test suite
    - to_entity() is the only way rows leave the persistence layer: callers
      receive frozen domain Tasks, never live ORM objects
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from checklist.core.domain_types import Task, TaskId
from checklist.db.base import Base


class TaskRecord(Base):
    """Persisted task row."""
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    def to_entity(self) -> Task:
        created_at = self.created_at
        # SQLite drops tzinfo on the way back; stored values are always UTC
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Task(
            id=TaskId(self.id),
            title=self.title,
            content=self.content or "",
            done=bool(self.done),
            created_at=created_at,
        )
