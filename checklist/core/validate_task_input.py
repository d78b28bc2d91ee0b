"""Task Input Validation — pure checks run before any store or cache call.

Invariants:
    - Titles are stripped; empty or whitespace-only titles are rejected
    - Ids must parse as UUIDs; anything else is a caller error, never a store lookup
    - Pure functions: no IO, raise TaskValidationError on failure
"""

from uuid import UUID

from checklist.core.domain_types import MAX_TITLE_LENGTH, TaskId
from checklist.core.errors import ErrorContext, TaskValidationError


def validate_title(title: str | None) -> str:
    """Return the stripped title or raise TaskValidationError."""
    cleaned = (title or "").strip()
    if not cleaned:
        raise TaskValidationError(
            "title cannot be empty or whitespace", field="title",
            context=ErrorContext(operation="create"),
        )
    if len(cleaned) > MAX_TITLE_LENGTH:
        raise TaskValidationError(
            f"title exceeds {MAX_TITLE_LENGTH} characters", field="title",
            context=ErrorContext(operation="create"),
        )
    return cleaned


def parse_task_id(raw: str | UUID, operation: str) -> TaskId:
    """Parse a caller-supplied identifier into a TaskId."""
    if isinstance(raw, UUID):
        return TaskId(raw)
    try:
        return TaskId(UUID(str(raw).strip()))
    except (ValueError, AttributeError, TypeError):
        raise TaskValidationError(
            f"'{raw}' is not a valid task id", field="id",
            context=ErrorContext(task_id=str(raw), operation=operation),
        )
