"""Redis Stream Audit — XADD payload and XREAD cursor handling.

Tests cover:
    - publish() writes {action, timestamp} with an approximate MAXLEN cap
    - read_batch() decodes byte replies and advances last_id
    - an empty XREAD reply (block timeout) yields no records
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

from checklist.core.domain_types import AuditAction, AuditEvent
from checklist.infrastructure.audit_stream import (
    RedisStreamAuditReader, RedisStreamAuditSink,
)


async def test_publish_appends_event_fields():
    client = AsyncMock()
    sink = RedisStreamAuditSink(client, "checklist:audit", maxlen=500)
    ts = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)

    await sink.publish(AuditEvent(action=AuditAction.MARK_DONE, timestamp=ts))

    args, kwargs = client.xadd.call_args
    assert args == ("checklist:audit", {
        "action": "mark_done", "timestamp": "2026-10-16T12:00:00+00:00",
    })
    assert kwargs == {"maxlen": 500, "approximate": True}


async def test_read_batch_decodes_and_advances_cursor():
    client = AsyncMock()
    client.xread.return_value = [
        (b"checklist:audit", [
            (b"1-0", {b"action": b"create", b"timestamp": b"t1"}),
            (b"2-0", {b"action": b"delete", b"timestamp": b"t2"}),
        ]),
    ]
    reader = RedisStreamAuditReader(client, "checklist:audit", last_id="0")

    records = await reader.read_batch()

    assert [(r.entry_id, r.action, r.timestamp) for r in records] == [
        ("1-0", "create", "t1"), ("2-0", "delete", "t2"),
    ]
    assert reader.last_id == "2-0"
    assert client.xread.call_args.args[0] == {"checklist:audit": "0"}


async def test_read_batch_timeout_returns_nothing():
    client = AsyncMock()
    client.xread.return_value = []
    reader = RedisStreamAuditReader(client, "checklist:audit")
    assert await reader.read_batch() == []
    assert reader.last_id == "$"
