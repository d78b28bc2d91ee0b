"""Request Dependencies — FastAPI providers for collaborators built in the lifespan.

Invariants:
    - Collaborators are read from app.state, never from module globals
    - Missing state (lifespan not run) is a programming error: RuntimeError

Design Decisions:
    - Providers, not direct app.state access in routes: tests swap them through
      app.dependency_overrides without touching the app object
"""

from fastapi import Request

from checklist.infrastructure.database import DatabaseSessionManager
from checklist.infrastructure.task_cache_redis import RedisTaskCache
from checklist.services.audit_fanout import AuditFanout
from checklist.services.task_orchestrator import TaskOrchestrator


def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized")
    return value


def get_orchestrator(request: Request) -> TaskOrchestrator:
    return _state(request, "orchestrator")


def get_audit(request: Request) -> AuditFanout:
    return _state(request, "audit")


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)


def get_task_cache(request: Request) -> RedisTaskCache | None:
    return getattr(request.app.state, "task_cache", None)
