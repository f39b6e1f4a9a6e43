"""Todo Routes — list with sort/filter/paging headers, plus CRUD.

Invariants:
    - GET /api/v1/todos never rejects sort/page/size values: they are resolved or
      clamped by core/list_query.py and echoed back in X-* headers
    - Request bodies are validated by Pydantic before reaching the handler
    - Missing todos raise ResourceNotFoundError (rendered as 404 by the global handler)

Design Decisions:
    - Store injected via get_todo_store dependency: tests override get_db only
    - Thin handlers: list logic in services/list_todos.py, field copies in services/todo_mapper.py
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.domain_types import TodoId
from todo_api.core.errors import ResourceNotFoundError
from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.todo_store import SqlAlchemyTodoStore
from todo_api.schemas.todo import TodoCreate, TodoPatch, TodoResponse, TodoUpdate
from todo_api.services.list_todos import list_page
from todo_api.services.todo_mapper import (
    apply_patch, new_record_from_create, record_from_update, to_response,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/todos", tags=["todos"])


def get_todo_store(db: AsyncSession = Depends(get_db)) -> SqlAlchemyTodoStore:
    return SqlAlchemyTodoStore(db)


@router.get("", response_model=list[TodoResponse])
async def list_todos(
    response: Response,
    page: int | None = Query(None, description="Zero-based page index, floored at 0"),
    size: int | None = Query(None, description="Page size, clamped to [1, 50]"),
    sort: str | None = Query(None, description="Field name, optional +/- prefix"),
    q: str | None = Query(None, description="Case-insensitive title substring"),
    store: SqlAlchemyTodoStore = Depends(get_todo_store),
):
    """List todos. Applied paging and sort are reported in X-* headers."""
    items, metadata = await list_page(store, sort, q, page, size)
    response.headers.update(metadata.to_headers())
    return [to_response(item) for item in items]


@router.post(
    "", response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate,
    response: Response,
    store: SqlAlchemyTodoStore = Depends(get_todo_store),
):
    """Create a new todo (completed=False)."""
    created = await store.add(new_record_from_create(body))
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return to_response(created)


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: UUID, store: SqlAlchemyTodoStore = Depends(get_todo_store),
):
    record = await store.get(TodoId(todo_id))
    if record is None:
        raise ResourceNotFoundError("Todo", str(todo_id))
    return to_response(record)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: UUID,
    body: TodoUpdate,
    store: SqlAlchemyTodoStore = Depends(get_todo_store),
):
    """Replace title and completed of an existing todo."""
    existing = await store.get(TodoId(todo_id))
    if existing is None:
        raise ResourceNotFoundError("Todo", str(todo_id))
    updated = await store.replace(
        record_from_update(TodoId(todo_id), body, existing),
    )
    return to_response(updated)


@router.patch("/{todo_id}", response_model=TodoResponse)
async def patch_todo(
    todo_id: UUID,
    body: TodoPatch,
    store: SqlAlchemyTodoStore = Depends(get_todo_store),
):
    """Apply only the fields present in the body."""
    existing = await store.get(TodoId(todo_id))
    if existing is None:
        raise ResourceNotFoundError("Todo", str(todo_id))
    patched = await store.replace(apply_patch(existing, body))
    return to_response(patched)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: UUID, store: SqlAlchemyTodoStore = Depends(get_todo_store),
):
    await store.delete(TodoId(todo_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
