"""Paging Types — value objects exchanged between the list-query core and the record store.

Invariants:
    - PageRequest is only built through build_page_request(), so index is in
      [0, MAX_PAGE_INDEX] (offset always fits a 64-bit SQL integer) and
      size in [MIN_PAGE_SIZE, MAX_PAGE_SIZE] by the time a store sees it
    - SortTerm keys are field names already validated against the todo shapes
    - Page totals are non-negative; total_pages is 0 for an empty result
"""

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from todo_api.core.domain_types import (
    DEFAULT_PAGE_INDEX, DEFAULT_PAGE_SIZE, MAX_PAGE_INDEX, MAX_PAGE_SIZE,
    MIN_PAGE_SIZE, SortDirection,
)

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    index: int
    size: int

    @property
    def offset(self) -> int:
        return self.index * self.size


@dataclass(frozen=True)
class SortTerm:
    key: str
    direction: SortDirection


SortSpec = tuple[SortTerm, ...]


@dataclass(frozen=True)
class Page(Generic[T]):
    """One bounded slice of a listing plus totals for the whole result."""
    items: Sequence[T]
    total_elements: int
    total_pages: int


def count_pages(total_elements: int, size: int) -> int:
    """Number of pages needed for total_elements at the given page size."""
    if total_elements <= 0:
        return 0
    return math.ceil(total_elements / size)


def build_page_request(raw_page: int | None, raw_size: int | None) -> PageRequest:
    """Clamp absent/out-of-range inputs: page into [0, 2**31 - 1], size into [1, 50]."""
    index = DEFAULT_PAGE_INDEX if raw_page is None else raw_page
    index = max(0, min(MAX_PAGE_INDEX, index))
    size = DEFAULT_PAGE_SIZE if raw_size is None else raw_size
    size = max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, size))
    return PageRequest(index=index, size=size)
