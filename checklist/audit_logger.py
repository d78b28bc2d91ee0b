"""Audit Logger — CLI that tails the audit stream and appends events to a log file.

Invariants:
    - One line per event: "[<received-at>] <action> <event-timestamp>"
    - Stream read errors are logged and retried after a pause; the loop never exits on them
    - The file is opened in append mode and flushed after every batch

Design Decisions:
    - Starts at "$" (only new events) unless --from-start is given
    - tail_audit_stream takes an optional batch limit so it can run bounded in tests
"""

import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path

import typer
from redis.exceptions import RedisError

from checklist.config import get_settings
from checklist.infrastructure.audit_stream import RedisStreamAuditReader, StreamRecord
from checklist.infrastructure.observability import setup_logging
from checklist.infrastructure.task_cache_redis import build_redis_client

logger = logging.getLogger(__name__)
app = typer.Typer(add_completion=False, help="Tail the task audit stream into a log file")


def format_record(record: StreamRecord, received_at: datetime) -> str:
    return f"[{received_at.isoformat()}] {record.action} {record.timestamp}\n"


async def tail_audit_stream(
    reader: RedisStreamAuditReader,
    log_path: Path,
    max_batches: int | None = None,
    error_pause_seconds: float = 1.0,
) -> int:
    """Copy stream entries into log_path; returns the number of lines written."""
    written = 0
    batches = 0
    with open(log_path, "a", encoding="utf-8") as fh:
        while max_batches is None or batches < max_batches:
            batches += 1
            try:
                records = await reader.read_batch()
            except (RedisError, OSError) as e:
                logger.error(f"Error reading audit stream: {e}")
                await asyncio.sleep(error_pause_seconds)
                continue
            for record in records:
                fh.write(format_record(record, datetime.now(timezone.utc)))
                written += 1
            if records:
                fh.flush()
    return written


async def _run(log_file: Path, from_start: bool, block_ms: int) -> None:
    settings = get_settings()
    client = build_redis_client(
        settings.effective_audit_redis_url,
        # XREAD BLOCK must not trip the socket timeout
        socket_timeout=block_ms / 1000 + settings.redis_socket_timeout_seconds + 1,
    )
    reader = RedisStreamAuditReader(
        client, settings.audit_stream,
        last_id="0" if from_start else "$", block_ms=block_ms,
    )
    try:
        await tail_audit_stream(reader, log_file)
    finally:
        await client.aclose()


@app.command()
def run(
    log_file: Path = typer.Option(
        ..., envvar="CHECKLIST_AUDIT_LOG_FILE", help="File to append audit lines to",
    ),
    from_start: bool = typer.Option(False, help="Replay the whole stream first"),
    block_ms: int = typer.Option(5_000, help="XREAD block timeout in milliseconds"),
):
    """Tail the audit stream until interrupted."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Audit logger started stream={settings.audit_stream} file={log_file}")
    try:
        asyncio.run(_run(log_file, from_start, block_ms))
    except KeyboardInterrupt:
        logger.info("Audit logger stopped")


if __name__ == "__main__":
    app()
