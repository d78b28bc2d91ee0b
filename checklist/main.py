"""Checklist API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ChecklistError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store, cache, orchestrator and audit fan-out built once in the lifespan
      and attached to app.state (no module-level client handles)
    - An unreachable cache at startup is logged, never fatal

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Audit stream reuses the cache's Redis client when both point at the same URL
"""

import logging
from contextlib import asynccontextmanager

import redis.asyncio as redis
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checklist.api.error_handlers import register_error_handlers
from checklist.api.routes import health, tasks
from checklist.config import Settings, get_settings
from checklist.core.cache_policy import CachePolicy
from checklist.infrastructure.audit_stream import RedisStreamAuditSink
from checklist.infrastructure.database import DatabaseSessionManager
from checklist.infrastructure.observability import setup_logging
from checklist.infrastructure.task_cache_redis import (
    RedisTaskCache, build_redis_client,
)
from checklist.infrastructure.task_store_sql import SqlTaskStore
from checklist.services.audit_fanout import AuditFanout, NullAuditSink
from checklist.services.task_orchestrator import TaskOrchestrator

logger = logging.getLogger(__name__)


def _build_audit_client(
    settings: Settings, cache_client: redis.Redis,
) -> redis.Redis | None:
    """Redis client for the audit stream; None when auditing is disabled."""
    if not settings.audit_enabled:
        return None
    if settings.effective_audit_redis_url == settings.redis_url:
        return cache_client
    return build_redis_client(
        settings.effective_audit_redis_url, settings.redis_socket_timeout_seconds,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    cache_client = build_redis_client(
        settings.redis_url, settings.redis_socket_timeout_seconds,
    )
    task_cache = RedisTaskCache(cache_client)
    if not await task_cache.ping():
        logger.warning("Cache unreachable at startup; serving from store only until it recovers")

    audit_client = _build_audit_client(settings, cache_client)
    audit_sink = (
        RedisStreamAuditSink(
            audit_client, settings.audit_stream, settings.audit_stream_maxlen,
        )
        if audit_client is not None else NullAuditSink()
    )

    app.state.db_manager = db_manager
    app.state.task_cache = task_cache
    app.state.orchestrator = TaskOrchestrator(
        SqlTaskStore(db_manager),
        task_cache,
        CachePolicy.from_seconds(
            settings.cache_item_ttl_seconds, settings.cache_list_ttl_seconds,
        ),
    )
    app.state.audit = AuditFanout(audit_sink)
    logger.info("Checklist API started")
    yield
    logger.info("Checklist API shutting down")
    if audit_client is not None and audit_client is not cache_client:
        await audit_client.aclose()
    await task_cache.close()
    await db_manager.dispose()


app = FastAPI(
    title="Checklist API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(tasks.router)

register_error_handlers(app)
