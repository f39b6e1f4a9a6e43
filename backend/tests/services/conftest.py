"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - seed_todos inserts a known set of rows (two titles contain "grocer")

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behaviour is not exercised here)
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from todo_api.db.base import Base
from todo_api.infrastructure.database import get_db, DatabaseSessionManager
from todo_api.infrastructure.todo_store import SqlAlchemyTodoStore
from todo_api.models.todo import Todo
import todo_api.infrastructure.database as db_module
from todo_api.main import app

SEED_TITLES = [
    ("Buy groceries", False),
    ("Grocery list for the weekend", False),
    ("Clean the kitchen", True),
    ("Pay electricity bill", False),
    ("Book dentist appointment", True),
    ("Renew passport", False),
    ("Water the plants", True),
    ("Call the GROCER about delivery", False),
]


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def store(test_db):
    return SqlAlchemyTodoStore(test_db)


@pytest.fixture
async def seed_todos(test_db):
    """Insert SEED_TITLES directly into the test DB."""
    rows = [Todo(title=title, completed=done) for title, done in SEED_TITLES]
    test_db.add_all(rows)
    await test_db.commit()
    for row in rows:
        await test_db.refresh(row)
    return rows


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
