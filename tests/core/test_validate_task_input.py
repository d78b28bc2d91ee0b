"""Task Input Validation — title and id checks that run before any IO.

Tests cover:
    - Titles are stripped; empty, whitespace-only and overlong titles rejected
    - UUID strings and UUID objects parse; garbage raises TaskValidationError
"""

from uuid import UUID, uuid4

import pytest

from checklist.core.domain_types import MAX_TITLE_LENGTH
from checklist.core.errors import TaskValidationError
from checklist.core.validate_task_input import parse_task_id, validate_title


def test_title_is_stripped():
    assert validate_title("  Buy milk  ") == "Buy milk"


@pytest.mark.parametrize("title", ["", "   ", "\n\t", None])
def test_empty_title_rejected(title):
    with pytest.raises(TaskValidationError) as exc:
        validate_title(title)
    assert exc.value.field == "title"
    assert exc.value.http_status == 400


def test_title_at_limit_accepted():
    assert len(validate_title("x" * MAX_TITLE_LENGTH)) == MAX_TITLE_LENGTH


def test_overlong_title_rejected():
    with pytest.raises(TaskValidationError):
        validate_title("x" * (MAX_TITLE_LENGTH + 1))


def test_parse_task_id_from_string():
    uid = uuid4()
    assert parse_task_id(str(uid), "delete") == uid


def test_parse_task_id_passes_uuid_through():
    uid = uuid4()
    parsed = parse_task_id(uid, "delete")
    assert isinstance(parsed, UUID)
    assert parsed == uid


@pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", "00000000-0000-0000-0000"])
def test_parse_task_id_rejects_garbage(raw):
    with pytest.raises(TaskValidationError) as exc:
        parse_task_id(raw, "mark_done")
    assert exc.value.field == "id"
    assert exc.value.context.operation == "mark_done"
