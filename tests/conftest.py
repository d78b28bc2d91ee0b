"""Root conftest — shared test configuration and in-memory collaborators.

Invariants:
    - Tests never reach a real PostgreSQL or Redis (env defaults point nowhere useful)
    - Each test gets fresh fakes; no state leaks between tests
"""

import os

import pytest

os.environ.setdefault(
    "CHECKLIST_DATABASE_URL", "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("CHECKLIST_REDIS_URL", "redis://localhost:6390/0")
os.environ.setdefault("CHECKLIST_LOG_FORMAT", "text")

from checklist.services.task_orchestrator import TaskOrchestrator  # noqa: E402
from tests.fakes import FakeTaskCache, FakeTaskStore, RecordingAuditSink  # noqa: E402


@pytest.fixture
def store():
    return FakeTaskStore()


@pytest.fixture
def cache():
    return FakeTaskCache()


@pytest.fixture
def audit_sink():
    return RecordingAuditSink()


@pytest.fixture
def orchestrator(store, cache):
    return TaskOrchestrator(store, cache)
