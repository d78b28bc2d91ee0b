"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 only if the database is unreachable (readiness)
    - An unreachable cache is reported as "degraded" but never makes the service unready

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Cache excluded from readiness: the store-only path keeps every operation working
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from checklist.api.dependencies import get_db_manager, get_task_cache
from checklist.infrastructure.database import DatabaseSessionManager
from checklist.infrastructure.task_cache_redis import RedisTaskCache

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "checklist-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    db_manager: DatabaseSessionManager | None = Depends(get_db_manager),
    cache: RedisTaskCache | None = Depends(get_task_cache),
):
    """Readiness probe: database connectivity, cache reported for information."""
    db_ok = await db_manager.health_check() if db_manager else False
    cache_ok = await cache.ping() if cache else False
    cache_status = "healthy" if cache_ok else "degraded"
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
                "checks": {"database": "unavailable", "cache": cache_status},
            },
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy", "cache": cache_status},
    }
