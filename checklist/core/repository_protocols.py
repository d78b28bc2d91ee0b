"""Boundary Protocols — contracts between the orchestrator and its collaborators.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Store is authoritative: assigns id/created_at, raises TaskNotFoundError or StoreError
    - Cache is best-effort: None means "absent", an exception means "failed"
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, production and in-memory test
      variants need no shared base class
    - Async in Protocol: every implementation does IO; the orchestrator awaits them
"""

from datetime import timedelta
from typing import Protocol

from checklist.core.domain_types import AuditEvent, Task, TaskId


class TaskStore(Protocol):
    """Contract for authoritative task persistence, implemented by shell."""
    async def create(self, title: str, content: str) -> Task: ...
    async def list(self) -> list[Task]: ...
    async def delete(self, task_id: TaskId) -> None: ...
    async def mark_done(self, task_id: TaskId) -> None: ...


class TaskCache(Protocol):
    """Contract for the TTL-bounded task cache, implemented by shell."""
    async def get_task(self, task_id: TaskId) -> Task | None: ...
    async def set_task(self, task: Task, ttl: timedelta) -> None: ...
    async def get_task_list(self) -> list[Task] | None: ...
    async def set_task_list(self, tasks: list[Task], ttl: timedelta) -> None: ...
    async def delete_task(self, task_id: TaskId) -> None: ...
    async def delete_task_list(self) -> None: ...


class AuditSink(Protocol):
    """Contract for fire-and-forget mutation notifications, implemented by shell."""
    async def publish(self, event: AuditEvent) -> None: ...
