"""Root conftest — shared test configuration."""

import os

# Tests never talk to a real PostgreSQL
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
