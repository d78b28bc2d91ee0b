"""Audit Logger — stream entries appended to the log file, read errors survived.

Tests cover:
    - One line per record: "[received-at] action timestamp"
    - A RedisError on one batch is logged and the loop continues
    - Existing file content is preserved (append mode)
"""

from redis.exceptions import ConnectionError as RedisConnectionError

from checklist.audit_logger import tail_audit_stream
from checklist.infrastructure.audit_stream import StreamRecord


class _ScriptedReader:
    """Returns (or raises) one scripted item per read_batch call."""

    def __init__(self, script):
        self._script = list(script)

    async def read_batch(self):
        item = self._script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


async def test_records_written_one_per_line(tmp_path):
    log = tmp_path / "audit.log"
    reader = _ScriptedReader([[
        StreamRecord("1-0", "create", "2026-10-16T12:00:00+00:00"),
        StreamRecord("2-0", "mark_done", "2026-10-16T12:00:01+00:00"),
    ]])

    written = await tail_audit_stream(reader, log, max_batches=1)

    lines = log.read_text(encoding="utf-8").splitlines()
    assert written == 2
    assert lines[0].startswith("[")
    assert lines[0].endswith("] create 2026-10-16T12:00:00+00:00")
    assert lines[1].endswith("] mark_done 2026-10-16T12:00:01+00:00")


async def test_read_error_is_survived(tmp_path, caplog):
    log = tmp_path / "audit.log"
    reader = _ScriptedReader([
        RedisConnectionError("refused"),
        [StreamRecord("3-0", "delete", "t")],
    ])

    written = await tail_audit_stream(
        reader, log, max_batches=2, error_pause_seconds=0,
    )

    assert written == 1
    assert "Error reading audit stream" in caplog.text
    assert log.read_text(encoding="utf-8").strip().endswith("delete t")


async def test_appends_to_existing_file(tmp_path):
    log = tmp_path / "audit.log"
    log.write_text("previous line\n", encoding="utf-8")
    reader = _ScriptedReader([[StreamRecord("4-0", "create", "t")]])

    await tail_audit_stream(reader, log, max_batches=1)

    assert log.read_text(encoding="utf-8").splitlines()[0] == "previous line"
