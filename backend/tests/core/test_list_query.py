"""List Query — paging clamps, two-term sort spec, filter normalisation, metadata.

Tests:
    - build_page_request is total and clamps instead of rejecting
    - Every plan's sort spec ends with the id ASC tie-break
    - Blank q is "no filter"; non-blank q passes through verbatim
    - Metadata reports applied values and renders as X-* headers
"""

import pytest

from todo_api.core.domain_types import MAX_PAGE_INDEX, ListHeader, SortDirection
from todo_api.core.list_query import (
    build_sort_spec, plan_list_query, render_list_metadata,
)
from todo_api.core.paging import (
    Page, PageRequest, SortTerm, build_page_request, count_pages,
)
from todo_api.core.sort_resolver import ResolvedSort


@pytest.mark.parametrize(
    "raw_page, raw_size, expected",
    [
        (None, None, PageRequest(0, 20)),
        (-5, None, PageRequest(0, 20)),
        (3, 10, PageRequest(3, 10)),
        (0, 999, PageRequest(0, 50)),
        (0, 0, PageRequest(0, 1)),
        (0, -7, PageRequest(0, 1)),
        (2, 50, PageRequest(2, 50)),
        (1, 1, PageRequest(1, 1)),
        (10**18, None, PageRequest(MAX_PAGE_INDEX, 20)),
        (MAX_PAGE_INDEX, 50, PageRequest(MAX_PAGE_INDEX, 50)),
    ],
)
def test_build_page_request_clamps(raw_page, raw_size, expected):
    assert build_page_request(raw_page, raw_size) == expected


def test_build_page_request_is_idempotent():
    first = build_page_request(-1, 999)
    assert build_page_request(first.index, first.size) == first


def test_page_request_offset():
    assert PageRequest(3, 20).offset == 60


def test_largest_offset_fits_signed_64_bit():
    request = build_page_request(10**30, 10**30)
    assert request.offset < 2**63


@pytest.mark.parametrize(
    "total, size, pages",
    [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (8, 5, 2)],
)
def test_count_pages(total, size, pages):
    assert count_pages(total, size) == pages


def test_sort_spec_appends_id_tie_break():
    spec = build_sort_spec(ResolvedSort("completed", SortDirection.DESC))
    assert spec == (
        SortTerm("completed", SortDirection.DESC),
        SortTerm("id", SortDirection.ASC),
    )


@pytest.mark.parametrize(
    "raw_sort", [None, "", "title", "-completed", "-COMPLETED", "-doesNotExist", "+id"],
)
def test_plan_always_has_two_sort_terms(raw_sort):
    plan = plan_list_query(raw_sort, None, None, None)
    assert len(plan.sort_spec) == 2
    assert plan.sort_spec[1] == SortTerm("id", SortDirection.ASC)
    assert plan.sort_spec[0] == SortTerm(
        plan.resolved_sort.applied_key, plan.resolved_sort.applied_direction,
    )


@pytest.mark.parametrize("raw_filter", [None, "", "   "])
def test_blank_filter_means_no_filter(raw_filter):
    assert plan_list_query(None, raw_filter, None, None).filter_text is None


def test_filter_passes_through_verbatim():
    assert plan_list_query(None, " Grocer ", None, None).filter_text == " Grocer "


def test_default_plan():
    plan = plan_list_query(None, None, None, None)
    assert plan.page_request == PageRequest(0, 20)
    assert plan.resolved_sort == ResolvedSort("title", SortDirection.ASC)


def test_metadata_reports_applied_values():
    plan = plan_list_query("-doesNotExist", None, -3, 500)
    metadata = render_list_metadata(
        plan, Page(items=[], total_elements=120, total_pages=3),
    )
    assert metadata.page == 0
    assert metadata.size == 50
    assert metadata.total_elements == 120
    assert metadata.total_pages == 3
    assert metadata.sort_key == "title"
    assert metadata.sort_direction is SortDirection.DESC


def test_metadata_headers():
    plan = plan_list_query("-completed", None, 1, 5)
    headers = render_list_metadata(
        plan, Page(items=[], total_elements=8, total_pages=2),
    ).to_headers()
    assert headers == {
        ListHeader.PAGE.value: "1",
        ListHeader.SIZE.value: "5",
        ListHeader.TOTAL_ELEMENTS.value: "8",
        ListHeader.TOTAL_PAGES.value: "2",
        ListHeader.SORT.value: "completed",
        ListHeader.SORT_DIR.value: "DESC",
    }
