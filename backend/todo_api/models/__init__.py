"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all /
      alembic autogenerate run
"""

from todo_api.models.todo import Todo  # noqa: F401
