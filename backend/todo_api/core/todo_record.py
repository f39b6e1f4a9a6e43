"""Todo Record — the store's plain value type for one todo.

Invariants:
    - Frozen: updates go through dataclasses.replace(), never in-place mutation
    - id is None only for a record that has not been persisted yet
"""

from dataclasses import dataclass
from datetime import datetime

from todo_api.core.domain_types import TodoId


@dataclass(frozen=True)
class TodoRecord:
    title: str
    completed: bool = False
    id: TodoId | None = None
    created_at: datetime | None = None
