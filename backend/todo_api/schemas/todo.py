"""Todo Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - title: 1-255 chars after stripping, never whitespace-only
    - TodoUpdate requires every writable field; TodoPatch makes all of them optional
    - TodoResponse is the externally visible shape (see core/todo_shapes.py)

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

TITLE_MAX_LENGTH = 255


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class TodoCreate(BaseModel):
    """Todo creation — only the title is client-supplied."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class TodoUpdate(BaseModel):
    """Full replacement (PUT)."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    completed: bool

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class TodoPatch(BaseModel):
    """Partial update (PATCH) — omitted fields are left untouched."""
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    completed: bool | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)


class TodoResponse(BaseModel):
    """Todo response — public-facing todo data."""
    id: UUID
    title: str
    completed: bool
