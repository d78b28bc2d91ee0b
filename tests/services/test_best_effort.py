"""Best-Effort Calls — failures are logged and discarded, cancellation is not.

Tests cover:
    - Success returns True
    - Typed and untyped failures return False and are logged with the operation name
    - asyncio.CancelledError propagates
"""

import asyncio
import logging

import pytest

from checklist.core.errors import CacheError
from checklist.services.best_effort import run_best_effort


async def _ok():
    return "value"


async def _raise(exc):
    raise exc


async def test_success_returns_true():
    assert await run_best_effort("cache.set_task", _ok()) is True


async def test_typed_failure_is_swallowed_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="checklist.services.best_effort"):
        ok = await run_best_effort(
            "cache.delete_task", _raise(CacheError("TimeoutError", "delete_task")),
            task_id="abc",
        )
    assert ok is False
    record = caplog.records[-1]
    assert record.operation == "cache.delete_task"
    assert record.error_code == "CACHE_ERROR"
    assert record.task_id == "abc"


async def test_untyped_failure_is_swallowed_with_traceback(caplog):
    with caplog.at_level(logging.WARNING, logger="checklist.services.best_effort"):
        ok = await run_best_effort("audit.publish", _raise(ConnectionError("down")))
    assert ok is False
    assert caplog.records[-1].exc_info is not None
    assert "audit.publish" in caplog.text


async def test_cancellation_propagates():
    with pytest.raises(asyncio.CancelledError):
        await run_best_effort("cache.set_task", _raise(asyncio.CancelledError()))
