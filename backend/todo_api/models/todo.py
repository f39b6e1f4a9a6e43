"""Todo ORM — persists one todo item.

Invariants:
    - id is UUID primary key (client never supplies it on create)
    - title is non-nullable, at most 255 chars
    - completed defaults to False
    - Column names match TODO_RECORD_SHAPE field names (core/todo_shapes.py),
      so a validated sort key is always a real column

Design Decisions:
    - created_at set by the application, not the DB: identical behaviour on
      PostgreSQL and the SQLite test database
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from todo_api.db.base import Base


class Todo(Base):
    __tablename__ = "todos"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
