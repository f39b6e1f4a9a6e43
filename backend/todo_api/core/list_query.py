"""List Query — pure planning and metadata rendering for the todo list endpoint.

Invariants:
    - plan_list_query() is total: any (sort, q, page, size) combination yields a plan
    - The sort spec always has exactly two terms: the resolved term, then id ASC
    - A blank q means "no filter"; a non-blank q is passed to the store verbatim
    - Metadata reports the applied (clamped/resolved) values, never the raw inputs

Design Decisions:
    - Pure functions only; the awaited store call lives in services/list_todos.py
      (ADR: functional core, imperative shell)
    - id ASC tie-break makes pagination reproducible when many rows share a sort value
"""

from dataclasses import dataclass

from todo_api.core.domain_types import (
    DEFAULT_SORT_KEY, TIE_BREAK_KEY, ListHeader, SortDirection,
)
from todo_api.core.field_capabilities import ShapeDescriptor
from todo_api.core.paging import (
    Page, PageRequest, SortSpec, SortTerm, build_page_request,
)
from todo_api.core.sort_resolver import DefaultSort, ResolvedSort, resolve_sort
from todo_api.core.todo_shapes import TODO_RECORD_SHAPE, TODO_RESPONSE_SHAPE

DEFAULT_TODO_SORT = DefaultSort(DEFAULT_SORT_KEY, SortDirection.ASC)


@dataclass(frozen=True)
class ListQueryPlan:
    page_request: PageRequest
    resolved_sort: ResolvedSort
    sort_spec: SortSpec
    filter_text: str | None


@dataclass(frozen=True)
class ListMetadata:
    page: int
    size: int
    total_elements: int
    total_pages: int
    sort_key: str
    sort_direction: SortDirection

    def to_headers(self) -> dict[str, str]:
        """Render as the X-* response headers."""
        return {
            ListHeader.PAGE.value: str(self.page),
            ListHeader.SIZE.value: str(self.size),
            ListHeader.TOTAL_ELEMENTS.value: str(self.total_elements),
            ListHeader.TOTAL_PAGES.value: str(self.total_pages),
            ListHeader.SORT.value: self.sort_key,
            ListHeader.SORT_DIR.value: self.sort_direction.value,
        }


def build_sort_spec(resolved: ResolvedSort) -> SortSpec:
    """Resolved term followed by the fixed id ASC tie-break."""
    return (
        SortTerm(resolved.applied_key, resolved.applied_direction),
        SortTerm(TIE_BREAK_KEY, SortDirection.ASC),
    )


def _normalize_filter(raw_filter: str | None) -> str | None:
    if raw_filter is None or not raw_filter.strip():
        return None
    return raw_filter


def plan_list_query(
    raw_sort: str | None,
    raw_filter: str | None,
    raw_page: int | None,
    raw_size: int | None,
    external_shape: ShapeDescriptor = TODO_RESPONSE_SHAPE,
    storage_shape: ShapeDescriptor = TODO_RECORD_SHAPE,
    default_sort: DefaultSort = DEFAULT_TODO_SORT,
) -> ListQueryPlan:
    """Turn raw request inputs into a fully-specified, safe query plan."""
    resolved = resolve_sort(external_shape, storage_shape, raw_sort, default_sort)
    return ListQueryPlan(
        page_request=build_page_request(raw_page, raw_size),
        resolved_sort=resolved,
        sort_spec=build_sort_spec(resolved),
        filter_text=_normalize_filter(raw_filter),
    )


def render_list_metadata(plan: ListQueryPlan, page: Page) -> ListMetadata:
    return ListMetadata(
        page=plan.page_request.index,
        size=plan.page_request.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        sort_key=plan.resolved_sort.applied_key,
        sort_direction=plan.resolved_sort.applied_direction,
    )
