"""Database Session Manager — schema creation, health check, error translation.

Tests cover:
    - create_all creates employee and orders tables
    - health_check succeeds on a reachable database
    - SQLAlchemy errors inside a session surface as DatabaseError
"""

import pytest
from sqlalchemy import inspect, text

from payroll.core.errors import DatabaseError
from payroll.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_create_all_creates_tables(manager):
    await manager.create_all()
    async with manager.engine.connect() as conn:
        tables = await conn.run_sync(lambda c: inspect(c).get_table_names())
    assert {"employee", "orders"} <= set(tables)


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_sqlalchemy_errors_become_database_error(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
