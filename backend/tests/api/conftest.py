"""API fixtures — FastAPI test client over both repository variants.

Invariants:
    - Every test gets a fresh store
    - "memory": repository providers overridden with in-memory repositories
    - "sql": get_db overridden with a fresh in-memory SQLite database

Design Decisions:
    - Parametrized client: every HTTP contract is checked against both stores
    - Lifespan is not run by ASGITransport, so no seed rows leak into tests
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import payroll.models  # noqa: F401
from payroll.api.dependencies import get_employee_repository, get_order_repository
from payroll.db.base import Base
from payroll.infrastructure.database import get_db
from payroll.infrastructure.memory_repositories import (
    InMemoryEmployeeRepository, InMemoryOrderRepository,
)
from payroll.main import app


async def _use_memory_store():
    employees = InMemoryEmployeeRepository()
    orders = InMemoryOrderRepository()
    app.dependency_overrides[get_employee_repository] = lambda: employees
    app.dependency_overrides[get_order_repository] = lambda: orders
    return None


async def _use_sql_store():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return engine


@pytest.fixture(params=["memory", "sql"])
async def client(request):
    """FastAPI test client with the store selected by the fixture param."""
    if request.param == "memory":
        engine = await _use_memory_store()
    else:
        engine = await _use_sql_store()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    if engine is not None:
        await engine.dispose()


@pytest.fixture
async def bilbo(client):
    res = await client.post(
        "/employees", json={"name": "Bilbo Baggins", "role": "burglar"},
    )
    return res.json()


@pytest.fixture
async def macbook(client):
    res = await client.post("/orders", json={"description": "MacBook"})
    return res.json()
