"""Redis Stream Audit Sink — append-only transport for task mutation events.

Invariants:
    - Each event becomes one stream entry with fields {action, timestamp}
    - timestamp is ISO-8601 UTC
    - Stream length is capped approximately (XADD MAXLEN ~) so it never grows unbounded
    - Publish failures raise; the fan-out layer decides to swallow them

Design Decisions:
    - Redis stream over a dedicated broker: the service already runs Redis for the
      cache, and XREAD gives the audit logger a simple blocking tail
"""

from dataclasses import dataclass

import redis.asyncio as redis

from checklist.core.domain_types import AuditEvent


@dataclass(frozen=True)
class StreamRecord:
    """One audit entry as read back from the stream."""
    entry_id: str
    action: str
    timestamp: str


def encode_event(event: AuditEvent) -> dict[str, str]:
    return {"action": event.action.value, "timestamp": event.timestamp.isoformat()}


class RedisStreamAuditSink:
    """Publishes audit events with XADD."""

    def __init__(self, client: redis.Redis, stream: str, maxlen: int = 10_000):
        self._client = client
        self._stream = stream
        self._maxlen = maxlen

    async def publish(self, event: AuditEvent) -> None:
        await self._client.xadd(
            self._stream, encode_event(event),
            maxlen=self._maxlen, approximate=True,
        )

    async def close(self) -> None:
        await self._client.aclose()


class RedisStreamAuditReader:
    """Blocking tail over the audit stream, starting after `last_id`."""

    def __init__(
        self, client: redis.Redis, stream: str,
        last_id: str = "$", block_ms: int = 5_000, batch_size: int = 100,
    ):
        self._client = client
        self._stream = stream
        self._last_id = last_id
        self._block_ms = block_ms
        self._batch_size = batch_size

    @property
    def last_id(self) -> str:
        return self._last_id

    async def read_batch(self) -> list[StreamRecord]:
        """Wait up to block_ms for new entries; advances the cursor."""
        response = await self._client.xread(
            {self._stream: self._last_id},
            count=self._batch_size, block=self._block_ms,
        )
        records: list[StreamRecord] = []
        for _stream_name, entries in response or []:
            for entry_id, fields in entries:
                entry_id = _as_str(entry_id)
                decoded = {_as_str(k): _as_str(v) for k, v in fields.items()}
                records.append(StreamRecord(
                    entry_id=entry_id,
                    action=decoded.get("action", "unknown"),
                    timestamp=decoded.get("timestamp", ""),
                ))
                self._last_id = entry_id
        return records


def _as_str(value: bytes | str) -> str:
    return value.decode() if isinstance(value, bytes) else value
