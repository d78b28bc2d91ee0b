"""Task Orchestrator — cache-aside reads and invalidate-on-write for tasks.

Invariants:
    - Store write always precedes any cache mutation; a failed store write
      performs no cache operation at all
    - Cache failures never propagate and never change a return value
    - list() skips the store only on a cache hit (present value, no error)
    - Every mutation invalidates the collection entry, whatever TTL remains
    - Item and collection invalidations are independent: one failing does not skip the other
    - No mutable state besides the CachePolicy: safe for concurrent requests without locks

Design Decisions:
    - Invalidate the collection instead of patching it (ADR: correctness over hit rate;
      a cached list is cheap to drop and expensive to reconcile)
    - Accepted race: a concurrent list() between a writer's commit and its invalidation
      may repopulate a stale collection entry; bounded by list_ttl
    - No timeouts or retries here; the store and cache clients own that policy
"""

from __future__ import annotations

import logging
from uuid import UUID

from checklist.core.cache_policy import DEFAULT_CACHE_POLICY, CachePolicy
from checklist.core.domain_types import MutationStatus, Task, TaskId
from checklist.core.errors import ChecklistError
from checklist.core.repository_protocols import TaskCache, TaskStore
from checklist.core.validate_task_input import parse_task_id, validate_title
from checklist.services.best_effort import run_best_effort

logger = logging.getLogger(__name__)


class TaskOrchestrator:
    """Composes the authoritative store and the best-effort cache."""

    def __init__(
        self,
        store: TaskStore,
        cache: TaskCache,
        policy: CachePolicy = DEFAULT_CACHE_POLICY,
    ):
        self._store = store
        self._cache = cache
        self._policy = policy

    @property
    def policy(self) -> CachePolicy:
        return self._policy

    async def create(self, title: str, content: str = "") -> Task:
        """Validate, persist, then prime the item entry and drop the collection."""
        cleaned = validate_title(title)
        task = await self._store.create(cleaned, content or "")
        task_id = str(task.id)
        await run_best_effort(
            "cache.set_task",
            self._cache.set_task(task, self._policy.item_ttl),
            task_id=task_id,
        )
        await run_best_effort(
            "cache.delete_task_list", self._cache.delete_task_list(),
            task_id=task_id,
        )
        logger.info("Task created", extra={"task_id": task_id, "operation": "create"})
        return task

    async def list(self) -> list[Task]:
        """Serve the collection from cache when present, else from the store."""
        cached = await self._cached_task_list()
        if cached is not None:
            return cached

        tasks = await self._store.list()
        await run_best_effort(
            "cache.set_task_list",
            self._cache.set_task_list(tasks, self._policy.list_ttl),
        )
        return tasks

    async def delete(self, raw_id: str | UUID) -> MutationStatus:
        """Delete in the store, then invalidate both entries."""
        task_id = parse_task_id(raw_id, "delete")
        await self._store.delete(task_id)
        await self._invalidate(task_id)
        logger.info("Task deleted", extra={"task_id": str(task_id), "operation": "delete"})
        return MutationStatus.DELETED

    async def mark_done(self, raw_id: str | UUID) -> MutationStatus:
        """Mark done in the store, then invalidate both entries."""
        task_id = parse_task_id(raw_id, "mark_done")
        await self._store.mark_done(task_id)
        await self._invalidate(task_id)
        logger.info("Task marked done",
            extra={"task_id": str(task_id), "operation": "mark_done"})
        return MutationStatus.DONE

    async def _cached_task_list(self) -> list[Task] | None:
        """Cache lookup where an error is indistinguishable from a miss."""
        try:
            return await self._cache.get_task_list()
        except ChecklistError as e:
            logger.warning("Task list cache read failed, using store: %s", e.message,
                extra={"operation": "cache.get_task_list", "error_code": e.code})
        except Exception as e:
            logger.warning("Task list cache read failed, using store: %s", e,
                extra={"operation": "cache.get_task_list"}, exc_info=True)
        return None

    async def _invalidate(self, task_id: TaskId) -> None:
        await run_best_effort(
            "cache.delete_task", self._cache.delete_task(task_id),
            task_id=str(task_id),
        )
        await run_best_effort(
            "cache.delete_task_list", self._cache.delete_task_list(),
            task_id=str(task_id),
        )
