"""In-Memory Collaborators — Protocol-conforming fakes for store, cache and audit sink.

Invariants:
    - FakeTaskStore assigns ids/created_at and raises TaskNotFoundError like the SQL store
    - FakeTaskCache honors TTLs against a manual clock (advance() moves time)
    - Every fake records calls in `calls` so tests can assert ordering and absence
    - Failure injection: fail_ops names operations that raise; unreachable fails all

Design Decisions:
    - Flat classes (no inheritance): simple, explicit, easy to debug
    - Cache failures raise ConnectionError (an untyped error) by default, so the
      orchestrator is exercised against failures it does not recognize
"""

import uuid
from datetime import datetime, timedelta, timezone

from checklist.core.cache_policy import TASK_LIST_KEY, task_key
from checklist.core.domain_types import AuditEvent, Task, TaskId
from checklist.core.errors import StoreError, TaskNotFoundError


class FakeTaskStore:
    """Dict-backed authoritative store."""

    def __init__(self):
        self.tasks: dict[TaskId, Task] = {}
        self.calls: list[str] = []
        self.fail_ops: set[str] = set()

    def count(self, op: str) -> int:
        return self.calls.count(op)

    def _enter(self, op: str) -> None:
        self.calls.append(op)
        if op in self.fail_ops:
            raise StoreError("connection refused", op)

    async def create(self, title: str, content: str) -> Task:
        self._enter("create")
        task = Task(
            id=TaskId(uuid.uuid4()), title=title, content=content,
            done=False, created_at=datetime.now(timezone.utc),
        )
        self.tasks[task.id] = task
        return task

    async def list(self) -> list[Task]:
        self._enter("list")
        return list(self.tasks.values())

    async def delete(self, task_id: TaskId) -> None:
        self._enter("delete")
        if task_id not in self.tasks:
            raise TaskNotFoundError(str(task_id))
        del self.tasks[task_id]

    async def mark_done(self, task_id: TaskId) -> None:
        self._enter("mark_done")
        task = self.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(str(task_id))
        self.tasks[task_id] = Task(
            id=task.id, title=task.title, content=task.content,
            done=True, created_at=task.created_at,
        )


class FakeTaskCache:
    """TTL-aware key/value cache with a manual clock."""

    def __init__(self):
        self.entries: dict[str, tuple[object, float]] = {}
        self.calls: list[str] = []
        self.fail_ops: set[str] = set()
        self.unreachable = False
        self.now = 0.0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def _enter(self, op: str) -> None:
        self.calls.append(op)
        if self.unreachable or op in self.fail_ops:
            raise ConnectionError(f"cache {op} unavailable")

    def _get(self, key: str):
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self.entries[key]
            return None
        return value

    def _set(self, key: str, value, ttl: timedelta) -> None:
        self.entries[key] = (value, self.now + ttl.total_seconds())

    def has(self, key: str) -> bool:
        return self._get(key) is not None

    async def get_task(self, task_id: TaskId) -> Task | None:
        self._enter("get_task")
        return self._get(task_key(task_id))

    async def set_task(self, task: Task, ttl: timedelta) -> None:
        self._enter("set_task")
        self._set(task_key(task.id), task, ttl)

    async def get_task_list(self) -> list[Task] | None:
        self._enter("get_task_list")
        cached = self._get(TASK_LIST_KEY)
        return list(cached) if cached is not None else None

    async def set_task_list(self, tasks: list[Task], ttl: timedelta) -> None:
        self._enter("set_task_list")
        self._set(TASK_LIST_KEY, list(tasks), ttl)

    async def delete_task(self, task_id: TaskId) -> None:
        self._enter("delete_task")
        self.entries.pop(task_key(task_id), None)

    async def delete_task_list(self) -> None:
        self._enter("delete_task_list")
        self.entries.pop(TASK_LIST_KEY, None)


class RecordingAuditSink:
    """Collects published events; can be told to fail."""

    def __init__(self, fail: bool = False):
        self.events: list[AuditEvent] = []
        self.fail = fail

    async def publish(self, event: AuditEvent) -> None:
        if self.fail:
            raise ConnectionError("audit stream unavailable")
        self.events.append(event)
