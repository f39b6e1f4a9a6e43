"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps a UUID — never use bare UUID in domain logic
    - SortDirection renders as the literal strings "ASC" / "DESC"
    - List metadata header names live in one enum (ListHeader)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and headers without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", UUID)


# ─── List Defaults ───────────────────────────────────────────────

DEFAULT_PAGE_INDEX = 0
DEFAULT_PAGE_SIZE = 20
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 50
MAX_PAGE_INDEX = 2**31 - 1

DEFAULT_SORT_KEY = "title"
TIE_BREAK_KEY = "id"
FILTER_FIELD = "title"


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Order-by direction — value is what the X-Sort-Dir header carries."""
    ASC = "ASC"
    DESC = "DESC"


class ListHeader(str, Enum):
    """Response headers carrying list metadata."""
    PAGE = "X-Page"
    SIZE = "X-Size"
    TOTAL_ELEMENTS = "X-Total-Elements"
    TOTAL_PAGES = "X-Total-Pages"
    SORT = "X-Sort"
    SORT_DIR = "X-Sort-Dir"
