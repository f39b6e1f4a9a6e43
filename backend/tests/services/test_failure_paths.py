"""Failure paths — store errors surface as 503, readiness reflects DB health.

Invariants:
    - DatabaseError raised by the store is rendered by the global handler (503)
    - SQLAlchemy errors inside a managed session become DatabaseError
    - Readiness probe is 200 with a working DB, 503 without one
"""

import pytest
from sqlalchemy import text

import todo_api.infrastructure.database as db_module
from todo_api.api.routes.todos import get_todo_store
from todo_api.core.errors import DatabaseError
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.main import app

BROKEN_URL = "sqlite+aiosqlite:////nonexistent-dir/todo.db"


class _FailingStore:
    async def list_all(self, page_request, sort_spec):
        raise DatabaseError("Connection or operational error", "execute")

    async def list_where_field_contains(self, *args):
        raise DatabaseError("Connection or operational error", "execute")


@pytest.fixture
def failing_store():
    app.dependency_overrides[get_todo_store] = lambda: _FailingStore()
    yield
    app.dependency_overrides.pop(get_todo_store, None)


async def test_store_failure_returns_503_envelope(client, failing_store):
    res = await client.get("/api/v1/todos")

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["severity"] == "critical"


async def test_session_manager_maps_operational_error():
    manager = DatabaseSessionManager(BROKEN_URL)
    try:
        with pytest.raises(DatabaseError) as exc_info:
            async with manager.session() as db:
                await db.execute(text("SELECT 1"))
        assert exc_info.value.operation == "execute"
    finally:
        await manager.dispose()


async def test_health_check_false_on_broken_database():
    manager = DatabaseSessionManager(BROKEN_URL)
    try:
        assert await manager.health_check() is False
    finally:
        await manager.dispose()


async def test_liveness(client):
    res = await client.get("/api/v1/health/")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
