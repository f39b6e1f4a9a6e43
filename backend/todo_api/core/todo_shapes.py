"""Todo Shapes — the two field tables the sort resolver checks keys against.

Invariants:
    - TODO_RECORD_SHAPE mirrors the `todos` table (models/todo.py)
    - TODO_RESPONSE_SHAPE mirrors TodoResponse (schemas/todo.py)
    - Both are built once at import and never mutated

Design Decisions:
    - created_at is stored and readable but absent from the response, so it is
      not a valid sort key from the outside (ADR: only visible fields are sortable)
"""

from todo_api.core.field_capabilities import (
    FieldSpec, ShapeDescriptor, SortableAccess,
)

TODO_RECORD_SHAPE = ShapeDescriptor(
    name="todo_record",
    fields=(
        FieldSpec("id"),
        FieldSpec("title"),
        FieldSpec("completed"),
        FieldSpec("created_at", writable=False),
    ),
    sortable_access=SortableAccess.READ,
)

TODO_RESPONSE_SHAPE = ShapeDescriptor(
    name="todo_response",
    fields=(
        FieldSpec("id"),
        FieldSpec("title"),
        FieldSpec("completed"),
    ),
)
