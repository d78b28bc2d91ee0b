"""Cache Policy — key derivation and TTL constants for the task cache.

Invariants:
    - Single-item entries live under "task:<id>"; the collection under "tasks:list"
    - Both TTLs are strictly positive
    - list_ttl <= item_ttl is recommended (collection staleness is more visible);
      a longer list TTL is accepted but logged

Design Decisions:
    - Keys derived here, not in the Redis adapter: any cache backend shares one layout
    - Whole-collection entry (no pagination, no deltas): invalidating one key is cheap,
      reconciling a cached list incrementally is not
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from uuid import UUID

logger = logging.getLogger(__name__)

TASK_KEY_PREFIX = "task:"
TASK_LIST_KEY = "tasks:list"

DEFAULT_ITEM_TTL = timedelta(seconds=60)
DEFAULT_LIST_TTL = timedelta(seconds=15)


def task_key(task_id: UUID | str) -> str:
    """Cache key for a single task entry."""
    return f"{TASK_KEY_PREFIX}{task_id}"


@dataclass(frozen=True)
class CachePolicy:
    """TTL pair applied by the orchestrator on every cache write."""
    item_ttl: timedelta = DEFAULT_ITEM_TTL
    list_ttl: timedelta = DEFAULT_LIST_TTL

    def __post_init__(self) -> None:
        if self.item_ttl <= timedelta(0) or self.list_ttl <= timedelta(0):
            raise ValueError("cache TTLs must be positive")
        if self.list_ttl > self.item_ttl:
            logger.warning(
                f"list TTL ({self.list_ttl.total_seconds()}s) exceeds item TTL "
                f"({self.item_ttl.total_seconds()}s); collection reads may stay stale longer",
            )

    @classmethod
    def from_seconds(cls, item_ttl: float, list_ttl: float) -> "CachePolicy":
        return cls(
            item_ttl=timedelta(seconds=item_ttl),
            list_ttl=timedelta(seconds=list_ttl),
        )


DEFAULT_CACHE_POLICY = CachePolicy()
