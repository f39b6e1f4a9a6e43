"""SqlAlchemyTodoStore — paging, ordering, filtering and CRUD against SQLite."""

import pytest
from uuid import uuid4

from todo_api.core.domain_types import SortDirection, TodoId
from todo_api.core.errors import ResourceNotFoundError
from todo_api.core.paging import PageRequest, SortTerm
from todo_api.core.todo_record import TodoRecord

BY_TITLE = (SortTerm("title", SortDirection.ASC), SortTerm("id", SortDirection.ASC))


async def test_list_all_paginates_and_counts(store, seed_todos):
    page = await store.list_all(PageRequest(0, 5), BY_TITLE)

    assert len(page.items) == 5
    assert page.total_elements == 8
    assert page.total_pages == 2


async def test_list_all_last_page_is_partial(store, seed_todos):
    page = await store.list_all(PageRequest(1, 5), BY_TITLE)
    assert len(page.items) == 3


async def test_page_past_the_end_is_empty_but_keeps_totals(store, seed_todos):
    page = await store.list_all(PageRequest(10, 5), BY_TITLE)
    assert page.items == []
    assert page.total_elements == 8


async def test_list_all_orders_by_title(store, seed_todos):
    page = await store.list_all(PageRequest(0, 50), BY_TITLE)
    titles = [t.title for t in page.items]
    assert titles == sorted(titles)


async def test_tie_break_orders_equal_keys_by_id(store, seed_todos):
    sort_spec = (SortTerm("completed", SortDirection.DESC), SortTerm("id", SortDirection.ASC))
    page = await store.list_all(PageRequest(0, 50), sort_spec)

    done = [t for t in page.items if t.completed]
    assert [t.completed for t in page.items] == sorted(
        (t.completed for t in page.items), reverse=True,
    )
    assert [t.id for t in done] == sorted(t.id for t in done)


async def test_paging_is_reproducible(store, seed_todos):
    sort_spec = (SortTerm("completed", SortDirection.ASC), SortTerm("id", SortDirection.ASC))
    first = await store.list_all(PageRequest(0, 3), sort_spec)
    again = await store.list_all(PageRequest(0, 3), sort_spec)
    assert [t.id for t in first.items] == [t.id for t in again.items]


async def test_contains_is_case_insensitive(store, seed_todos):
    page = await store.list_where_field_contains(
        "title", "grocer", True, PageRequest(0, 20), BY_TITLE,
    )
    assert page.total_elements == 3
    assert all("grocer" in t.title.lower() for t in page.items)


async def test_contains_treats_wildcards_literally(store, seed_todos):
    page = await store.list_where_field_contains(
        "title", "%", True, PageRequest(0, 20), BY_TITLE,
    )
    assert page.items == []
    assert page.total_elements == 0
    assert page.total_pages == 0


async def test_unknown_sort_column_is_rejected(store, seed_todos):
    with pytest.raises(ValueError):
        await store.list_all(
            PageRequest(0, 5), (SortTerm("nope", SortDirection.ASC),),
        )


async def test_add_assigns_id_and_defaults(store):
    created = await store.add(TodoRecord(title="Write some tests"))
    assert created.id is not None
    assert created.completed is False
    assert created.created_at is not None
    assert await store.exists(created.id)


async def test_get_missing_returns_none(store):
    assert await store.get(TodoId(uuid4())) is None


async def test_replace_overwrites_fields(store):
    created = await store.add(TodoRecord(title="Old"))
    updated = await store.replace(
        TodoRecord(id=created.id, title="New", completed=True),
    )
    assert (updated.title, updated.completed) == ("New", True)
    assert (await store.get(created.id)).title == "New"


async def test_replace_missing_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError):
        await store.replace(TodoRecord(id=TodoId(uuid4()), title="x"))


async def test_delete_removes_row(store):
    created = await store.add(TodoRecord(title="Delete me"))
    await store.delete(created.id)
    assert not await store.exists(created.id)


async def test_delete_missing_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError):
        await store.delete(TodoId(uuid4()))
