"""Root conftest — shared test configuration."""

import os

# Never touch a real database from tests
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
