"""SQL Task Store — authoritative TaskStore implementation over SQLAlchemy async.

Invariants:
    - id and created_at assigned here at insert time, never updated afterwards
    - delete/mark_done raise TaskNotFoundError when no row matches the id
    - mark_done on an already-done task succeeds (the row still matches)
    - Every other failure surfaces as StoreError via DatabaseSessionManager
    - Each call runs in its own session and commits before returning

Design Decisions:
    - Rowcount for not-found detection: one round trip per mutation, no SELECT-then-write
    - Returns frozen domain Tasks (TaskRecord.to_entity), never ORM instances
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import delete, select, update

from checklist.core.domain_types import Task, TaskId
from checklist.core.errors import TaskNotFoundError
from checklist.infrastructure.database import DatabaseSessionManager
from checklist.models.task import TaskRecord

logger = logging.getLogger(__name__)


class SqlTaskStore:
    """Task persistence backed by the relational database."""

    def __init__(self, sessions: DatabaseSessionManager):
        self._sessions = sessions

    async def create(self, title: str, content: str) -> Task:
        async with self._sessions.session() as db:
            record = TaskRecord(
                id=uuid.uuid4(),
                title=title,
                content=content,
                done=False,
                created_at=datetime.now(timezone.utc),
            )
            db.add(record)
            await db.commit()
            logger.debug("Task row inserted", extra={"task_id": str(record.id)})
            return record.to_entity()

    async def list(self) -> list[Task]:
        async with self._sessions.session() as db:
            result = await db.execute(
                select(TaskRecord).order_by(
                    TaskRecord.created_at.asc(), TaskRecord.id.asc(),
                ),
            )
            return [r.to_entity() for r in result.scalars().all()]

    async def delete(self, task_id: TaskId) -> None:
        async with self._sessions.session() as db:
            result = await db.execute(
                delete(TaskRecord).where(TaskRecord.id == task_id),
            )
            if result.rowcount == 0:
                raise TaskNotFoundError(str(task_id))
            await db.commit()

    async def mark_done(self, task_id: TaskId) -> None:
        async with self._sessions.session() as db:
            result = await db.execute(
                update(TaskRecord)
                .where(TaskRecord.id == task_id)
                .values(done=True),
            )
            if result.rowcount == 0:
                raise TaskNotFoundError(str(task_id))
            await db.commit()
