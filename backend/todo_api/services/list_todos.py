"""List Todos — runs one planned list query against the store and renders its metadata.

Invariants:
    - Exactly one store call per invocation (list_all OR list_where_field_contains)
    - The filter always targets the title field, case-insensitively
    - Store exceptions propagate unchanged — no retry, no local recovery

Design Decisions:
    - Impureim sandwich: plan_list_query (pure) → await store → render_list_metadata (pure)
"""

import logging
from typing import Sequence

from todo_api.core.domain_types import FILTER_FIELD
from todo_api.core.list_query import (
    ListMetadata, plan_list_query, render_list_metadata,
)
from todo_api.core.repository_protocols import TodoStore
from todo_api.core.todo_record import TodoRecord

logger = logging.getLogger(__name__)


async def list_page(
    store: TodoStore,
    raw_sort: str | None = None,
    raw_filter: str | None = None,
    raw_page: int | None = None,
    raw_size: int | None = None,
) -> tuple[Sequence[TodoRecord], ListMetadata]:
    """List one page of todos for the given raw request inputs."""
    plan = plan_list_query(raw_sort, raw_filter, raw_page, raw_size)
    logger.debug(
        "Resolved todo list query",
        extra={
            "sort_key": plan.resolved_sort.applied_key,
            "sort_direction": plan.resolved_sort.applied_direction.value,
            "page": plan.page_request.index,
            "size": plan.page_request.size,
        },
    )

    if plan.filter_text is None:
        page = await store.list_all(plan.page_request, plan.sort_spec)
    else:
        page = await store.list_where_field_contains(
            FILTER_FIELD, plan.filter_text, True,
            plan.page_request, plan.sort_spec,
        )

    return page.items, render_list_metadata(plan, page)
