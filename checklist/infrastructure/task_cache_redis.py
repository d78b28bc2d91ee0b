"""Redis Task Cache — TaskCache implementation over redis.asyncio.

Invariants:
    - A missing key returns None (miss); it is never an error
    - Redis failures and undecodable payloads raise CacheError, nothing else
    - Every write carries an explicit TTL (SET ... EX)
    - Key layout comes from core/cache_policy.py

Design Decisions:
    - JSON via pydantic TypeAdapter over the domain dataclass: one schema for
      single entries and collections, strict on decode
    - Timeouts are the client's job (socket_timeout / socket_connect_timeout in
      build_redis_client), so an unreachable cache fails fast into CacheError
"""

import logging
from datetime import timedelta

import redis.asyncio as redis
from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError

from checklist.core.cache_policy import TASK_LIST_KEY, task_key
from checklist.core.domain_types import Task, TaskId
from checklist.core.errors import CacheError, ErrorContext

logger = logging.getLogger(__name__)

_TASK = TypeAdapter(Task)
_TASK_LIST = TypeAdapter(list[Task])


def build_redis_client(url: str, socket_timeout: float = 0.5) -> redis.Redis:
    """Create a pooled async Redis client with bounded socket timeouts."""
    return redis.from_url(
        url,
        socket_timeout=socket_timeout,
        socket_connect_timeout=socket_timeout,
        health_check_interval=30,
    )


class RedisTaskCache:
    """Best-effort task cache stored as JSON strings in Redis."""

    def __init__(self, client: redis.Redis):
        self._client = client

    async def get_task(self, task_id: TaskId) -> Task | None:
        key = task_key(task_id)
        raw = await self._call("get_task", self._client.get(key), key)
        if raw is None:
            return None
        return self._decode(_TASK, raw, "get_task", key)

    async def set_task(self, task: Task, ttl: timedelta) -> None:
        key = task_key(task.id)
        await self._call(
            "set_task", self._client.set(key, _TASK.dump_json(task), ex=ttl), key,
        )

    async def get_task_list(self) -> list[Task] | None:
        raw = await self._call(
            "get_task_list", self._client.get(TASK_LIST_KEY), TASK_LIST_KEY,
        )
        if raw is None:
            return None
        return self._decode(_TASK_LIST, raw, "get_task_list", TASK_LIST_KEY)

    async def set_task_list(self, tasks: list[Task], ttl: timedelta) -> None:
        await self._call(
            "set_task_list",
            self._client.set(TASK_LIST_KEY, _TASK_LIST.dump_json(tasks), ex=ttl),
            TASK_LIST_KEY,
        )

    async def delete_task(self, task_id: TaskId) -> None:
        key = task_key(task_id)
        await self._call("delete_task", self._client.delete(key), key)

    async def delete_task_list(self) -> None:
        await self._call(
            "delete_task_list", self._client.delete(TASK_LIST_KEY), TASK_LIST_KEY,
        )

    async def ping(self) -> bool:
        """Cache reachability (for readiness probes). Never raises."""
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError) as e:
            logger.warning(f"Cache ping failed: {e}")
            return False

    async def close(self) -> None:
        await self._client.aclose()

    @staticmethod
    async def _call(operation: str, call, key: str):
        try:
            return await call
        except (RedisError, OSError) as e:
            raise CacheError(
                type(e).__name__, operation,
                ErrorContext(debug_info={"cache_key": key}),
            ) from e

    @staticmethod
    def _decode(adapter: TypeAdapter, raw: bytes, operation: str, key: str):
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Discarding undecodable cache entry {key}: {e.error_count()} errors",
                extra={"cache_key": key, "operation": operation},
            )
            raise CacheError(
                "undecodable payload", operation,
                ErrorContext(debug_info={"cache_key": key}),
            ) from e
