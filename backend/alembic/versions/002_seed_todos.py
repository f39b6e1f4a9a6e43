"""Seed demo todos.

Revision ID: 002_seed_todos
Revises: 001_create_todos
Create Date: 2026-10-18

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "002_seed_todos"
down_revision: Union[str, None] = "001_create_todos"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SEED_TODOS = [
    ("073c98bc-4fa0-4ede-b121-6be06c25977f", "Buy groceries", False),
    ("5f0c2a1e-3d7b-4a58-9c61-0b8e4f2d7a13", "Grocery list for the weekend", False),
    ("a1d4e6f8-2b3c-4d5e-8f90-1a2b3c4d5e6f", "Clean the kitchen", True),
    ("b2e5f7a9-3c4d-4e6f-9a01-2b3c4d5e6f70", "Pay electricity bill", False),
    ("c3f6a8b0-4d5e-4f70-8b12-3c4d5e6f7081", "Book dentist appointment", True),
    ("d4a7b9c1-5e6f-4081-9c23-4d5e6f708192", "Renew passport", False),
    ("e5b8c0d2-6f70-4192-8d34-5e6f708192a3", "Water the plants", True),
    ("f6c9d1e3-7081-42a3-9e45-6f708192a3b4", "Call the grocer about delivery", False),
]

_todos = sa.table(
    "todos",
    sa.column("id", UUID(as_uuid=True)),
    sa.column("title", sa.String),
    sa.column("completed", sa.Boolean),
)


def upgrade() -> None:
    op.bulk_insert(
        _todos,
        [
            {"id": uuid.UUID(todo_id), "title": title, "completed": completed}
            for todo_id, title, completed in SEED_TODOS
        ],
    )


def downgrade() -> None:
    op.execute(
        _todos.delete().where(
            _todos.c.id.in_([uuid.UUID(todo_id) for todo_id, _, _ in SEED_TODOS]),
        ),
    )
