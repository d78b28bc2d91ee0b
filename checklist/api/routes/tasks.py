"""Task Routes — HTTP surface for the four task operations.

Invariants:
    - Routes hold no cache or store logic: every call goes through TaskOrchestrator
    - Audit events are scheduled only after the orchestrator returned successfully
    - Errors propagate as ChecklistError and are mapped by the global handlers

Design Decisions:
    - Task id taken as a raw path string: the orchestrator owns id parsing, so a
      malformed id is the same TaskValidationError for HTTP and non-HTTP callers
    - Audit via BackgroundTasks: runs after the response is sent (fire-and-forget)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status

from checklist.api.dependencies import get_audit, get_orchestrator
from checklist.core.domain_types import AuditAction
from checklist.schemas.task import (
    StatusResponse, TaskCreate, TaskListResponse, TaskResponse,
)
from checklist.services.audit_fanout import AuditFanout
from checklist.services.task_orchestrator import TaskOrchestrator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    background_tasks: BackgroundTasks,
    orchestrator: TaskOrchestrator = Depends(get_orchestrator),
    audit: AuditFanout = Depends(get_audit),
):
    """Create a task."""
    task = await orchestrator.create(body.title, body.content)
    background_tasks.add_task(audit.emit, AuditAction.CREATE)
    return TaskResponse.from_entity(task)


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    orchestrator: TaskOrchestrator = Depends(get_orchestrator),
):
    """List all tasks (served from cache when fresh)."""
    tasks = await orchestrator.list()
    return TaskListResponse(tasks=[TaskResponse.from_entity(t) for t in tasks])


@router.delete("/{task_id}", response_model=StatusResponse)
async def delete_task(
    task_id: str,
    background_tasks: BackgroundTasks,
    orchestrator: TaskOrchestrator = Depends(get_orchestrator),
    audit: AuditFanout = Depends(get_audit),
):
    """Delete a task."""
    result = await orchestrator.delete(task_id)
    background_tasks.add_task(audit.emit, AuditAction.DELETE)
    return StatusResponse(status=result)


@router.put("/{task_id}/done", response_model=StatusResponse)
async def mark_task_done(
    task_id: str,
    background_tasks: BackgroundTasks,
    orchestrator: TaskOrchestrator = Depends(get_orchestrator),
    audit: AuditFanout = Depends(get_audit),
):
    """Mark a task as done."""
    result = await orchestrator.mark_done(task_id)
    background_tasks.add_task(audit.emit, AuditAction.MARK_DONE)
    return StatusResponse(status=result)
