"""API fixtures — httpx client over the ASGI app with collaborators overridden.

Design Decisions:
    - The lifespan is not run: dependency_overrides supply the orchestrator and
      audit fan-out, so no PostgreSQL or Redis connection is ever attempted
"""

import pytest
from httpx import ASGITransport, AsyncClient

from checklist.api.dependencies import (
    get_audit, get_db_manager, get_orchestrator, get_task_cache,
)
from checklist.main import app
from checklist.services.audit_fanout import AuditFanout


@pytest.fixture
def audit(audit_sink):
    return AuditFanout(audit_sink)


@pytest.fixture
async def client(orchestrator, audit):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_audit] = lambda: audit
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


class StubDbManager:
    def __init__(self, healthy: bool):
        self.healthy = healthy

    async def health_check(self) -> bool:
        return self.healthy


class StubCache:
    def __init__(self, reachable: bool):
        self.reachable = reachable

    async def ping(self) -> bool:
        return self.reachable


@pytest.fixture
def probe_client():
    """Client factory for readiness checks with stubbed database/cache."""

    def _build(db_ok: bool, cache_ok: bool) -> AsyncClient:
        app.dependency_overrides[get_db_manager] = lambda: StubDbManager(db_ok)
        app.dependency_overrides[get_task_cache] = lambda: StubCache(cache_ok)
        return AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        )

    yield _build
    app.dependency_overrides.clear()
