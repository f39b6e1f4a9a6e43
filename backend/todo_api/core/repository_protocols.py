"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Store failures propagate to the caller untouched (no retry, no masking)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves —
      the shell orchestrates the async calls around the pure logic
"""

from typing import Protocol

from todo_api.core.domain_types import TodoId
from todo_api.core.paging import Page, PageRequest, SortSpec
from todo_api.core.todo_record import TodoRecord


class TodoStore(Protocol):
    """Contract for todo persistence — implemented by shell."""
    async def list_all(
        self, page_request: PageRequest, sort_spec: SortSpec,
    ) -> Page[TodoRecord]: ...
    async def list_where_field_contains(
        self,
        field_name: str,
        substring: str,
        case_insensitive: bool,
        page_request: PageRequest,
        sort_spec: SortSpec,
    ) -> Page[TodoRecord]: ...
    async def get(self, todo_id: TodoId) -> TodoRecord | None: ...
    async def exists(self, todo_id: TodoId) -> bool: ...
    async def add(self, record: TodoRecord) -> TodoRecord: ...
    async def replace(self, record: TodoRecord) -> TodoRecord: ...
    async def delete(self, todo_id: TodoId) -> None: ...
