"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps UUID; never use bare str ids in domain logic
    - Task is immutable once built; id and created_at come from the store only
    - done only transitions False -> True (no un-done operation exists)
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclass for Task: core stays free of ORM and pydantic imports;
      adapters serialize it (TypeAdapter in the cache, ORM mapping in the store)
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", UUID)


# ─── Limits ──────────────────────────────────────────────────────

MAX_TITLE_LENGTH = 200
MAX_CONTENT_LENGTH = 10_000


# ─── Enums ───────────────────────────────────────────────────────

class MutationStatus(str, Enum):
    """Status reported to callers after a successful mutation."""
    DELETED = "deleted"
    DONE = "done"


class AuditAction(str, Enum):
    """Completed mutations announced to the audit sink."""
    CREATE = "create"
    DELETE = "delete"
    MARK_DONE = "mark_done"


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Task:
    """A single work item as reported by the authoritative store."""
    id: TaskId
    title: str
    content: str
    done: bool
    created_at: datetime


@dataclass(frozen=True, slots=True)
class AuditEvent:
    """Fire-and-forget record of a completed mutation."""
    action: AuditAction
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
