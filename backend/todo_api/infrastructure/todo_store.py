"""SQLAlchemy Todo Store — TodoStore protocol implementation over an AsyncSession.

Invariants:
    - Every listing applies ORDER BY for every SortTerm, then LIMIT/OFFSET from the PageRequest
    - total_elements counts the whole (filtered) result, not the page
    - Substring filters escape LIKE wildcards: "%" and "_" in user text match literally
    - Returns TodoRecord values, never ORM instances (callers stay decoupled from the session)
    - Write operations commit; SQLAlchemy errors surface as DatabaseError via DatabaseSessionManager

Design Decisions:
    - Sort keys resolved against Todo.__table__.c: only real columns can reach ORDER BY
    - Separate COUNT query over the same WHERE clause (ADR: portable across PostgreSQL and SQLite)
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.domain_types import SortDirection, TodoId
from todo_api.core.errors import ResourceNotFoundError
from todo_api.core.paging import Page, PageRequest, SortSpec, count_pages
from todo_api.core.todo_record import TodoRecord
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


def _column(key: str):
    column = Todo.__table__.c.get(key)
    if column is None:
        raise ValueError(f"Unknown todo column: {key}")
    return column


def _to_record(row: Todo) -> TodoRecord:
    return TodoRecord(
        id=TodoId(row.id),
        title=row.title,
        completed=row.completed,
        created_at=row.created_at,
    )


class SqlAlchemyTodoStore:
    """Todo persistence backed by the `todos` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(
        self, page_request: PageRequest, sort_spec: SortSpec,
    ) -> Page[TodoRecord]:
        return await self._fetch_page(select(Todo), page_request, sort_spec)

    async def list_where_field_contains(
        self,
        field_name: str,
        substring: str,
        case_insensitive: bool,
        page_request: PageRequest,
        sort_spec: SortSpec,
    ) -> Page[TodoRecord]:
        column = _column(field_name)
        if case_insensitive:
            condition = column.icontains(substring, autoescape=True)
        else:
            condition = column.contains(substring, autoescape=True)
        return await self._fetch_page(
            select(Todo).where(condition), page_request, sort_spec,
        )

    async def _fetch_page(
        self, query: Select, page_request: PageRequest, sort_spec: SortSpec,
    ) -> Page[TodoRecord]:
        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar_one()

        for term in sort_spec:
            column = _column(term.key)
            query = query.order_by(
                column.desc() if term.direction is SortDirection.DESC else column.asc(),
            )
        query = query.limit(page_request.size).offset(page_request.offset)

        result = await self.db.execute(query)
        items = [_to_record(row) for row in result.scalars().all()]
        return Page(
            items=items,
            total_elements=total,
            total_pages=count_pages(total, page_request.size),
        )

    async def get(self, todo_id: TodoId) -> TodoRecord | None:
        row = await self.db.get(Todo, todo_id)
        return _to_record(row) if row else None

    async def exists(self, todo_id: TodoId) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(Todo).where(Todo.id == todo_id),
        )
        return result.scalar_one() > 0

    async def add(self, record: TodoRecord) -> TodoRecord:
        row = Todo(title=record.title, completed=record.completed)
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info("Todo created", extra={"todo_id": str(row.id)})
        return _to_record(row)

    async def replace(self, record: TodoRecord) -> TodoRecord:
        row = await self.db.get(Todo, record.id)
        if row is None:
            raise ResourceNotFoundError("Todo", str(record.id))
        row.title = record.title
        row.completed = record.completed
        await self.db.commit()
        await self.db.refresh(row)
        logger.info("Todo updated", extra={"todo_id": str(row.id)})
        return _to_record(row)

    async def delete(self, todo_id: TodoId) -> None:
        row = await self.db.get(Todo, todo_id)
        if row is None:
            raise ResourceNotFoundError("Todo", str(todo_id))
        await self.db.delete(row)
        await self.db.commit()
        logger.info("Todo deleted", extra={"todo_id": str(todo_id)})
