"""Todo Mapper — field copies between API schemas and TodoRecord.

Invariants:
    - Create maps title only; completed starts False, id is assigned by the store
    - Update (PUT) overwrites every writable field
    - Patch copies the record by value, then overwrites only the fields the
      client actually sent (None means "not sent")
    - Inputs are never mutated
"""

from dataclasses import replace

from todo_api.core.domain_types import TodoId
from todo_api.core.todo_record import TodoRecord
from todo_api.schemas.todo import TodoCreate, TodoPatch, TodoResponse, TodoUpdate


def to_response(record: TodoRecord) -> TodoResponse:
    return TodoResponse(
        id=record.id, title=record.title, completed=record.completed,
    )


def new_record_from_create(body: TodoCreate) -> TodoRecord:
    return TodoRecord(title=body.title)


def record_from_update(
    todo_id: TodoId, body: TodoUpdate, existing: TodoRecord | None = None,
) -> TodoRecord:
    """Full replacement; keeps server-managed fields (created_at) from existing."""
    created_at = existing.created_at if existing else None
    return TodoRecord(
        id=todo_id, title=body.title, completed=body.completed,
        created_at=created_at,
    )


def apply_patch(record: TodoRecord, body: TodoPatch) -> TodoRecord:
    """Copy-and-patch: only non-None fields of body are applied."""
    changes = {}
    if body.title is not None:
        changes["title"] = body.title
    if body.completed is not None:
        changes["completed"] = body.completed
    return replace(record, **changes)
