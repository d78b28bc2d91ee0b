"""Task Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - TaskCreate.title: 1-200 chars after stripping, non-empty
    - TaskCreate.content: optional, up to 10000 chars, defaults to ""
    - Responses are built from domain Tasks only (never from ORM rows)

Design Decisions:
    - Boundary validation duplicates the orchestrator's title check on purpose:
      HTTP callers get field-level details, other callers still get TaskValidationError
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from checklist.core.domain_types import (
    MAX_CONTENT_LENGTH, MAX_TITLE_LENGTH, MutationStatus, Task,
)


class TaskCreate(BaseModel):
    """Task creation: validates title length and whitespace."""
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field("", max_length=MAX_CONTENT_LENGTH)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TaskResponse(BaseModel):
    """Task response: public-facing task data."""
    id: UUID
    title: str
    content: str
    done: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            content=task.content,
            done=task.done,
            created_at=task.created_at,
        )


class TaskListResponse(BaseModel):
    """Collection response for GET /tasks."""
    tasks: list[TaskResponse]


class StatusResponse(BaseModel):
    """Outcome of a delete or mark-done request."""
    status: MutationStatus
