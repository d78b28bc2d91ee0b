"""Audit Fan-out — fire-and-forget notifications of completed task mutations.

Invariants:
    - emit() never raises: sink failures are logged and dropped
    - Events are emitted only after the store commit succeeded (caller's duty)
    - No acknowledgement, no retry

Design Decisions:
    - Scheduled by the gateway through FastAPI BackgroundTasks, so the event is
      published after the response body is produced (ADR: audit never adds latency)
    - NullAuditSink when auditing is disabled: call sites never branch on config
"""

import logging

from checklist.core.domain_types import AuditAction, AuditEvent
from checklist.core.repository_protocols import AuditSink
from checklist.services.best_effort import run_best_effort

logger = logging.getLogger(__name__)


class NullAuditSink:
    """Sink that drops every event (auditing disabled)."""

    async def publish(self, event: AuditEvent) -> None:
        return None


class AuditFanout:
    """Builds audit events and hands them to the sink, best-effort."""

    def __init__(self, sink: AuditSink):
        self._sink = sink

    async def emit(self, action: AuditAction) -> bool:
        event = AuditEvent(action=action)
        delivered = await run_best_effort(
            "audit.publish", self._sink.publish(event), action=action.value,
        )
        if delivered:
            logger.debug("Audit event published", extra={"action": action.value})
        return delivered
