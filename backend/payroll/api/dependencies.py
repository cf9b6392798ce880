"""FastAPI Dependencies — wire repositories, URI builder and assemblers into routes.

Invariants:
    - Repositories are request-scoped: one AsyncSession per request via get_db
    - Assemblers receive the same UriBuilder used to set Location headers

Design Decisions:
    - Tests swap the repository providers via app.dependency_overrides
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from payroll.core.assembler import EmployeeModelAssembler, OrderModelAssembler
from payroll.core.repository_protocols import EmployeeRepository, OrderRepository
from payroll.core.uri_builder import UriBuilder
from payroll.infrastructure.database import get_db
from payroll.infrastructure.sql_repositories import (
    SqlEmployeeRepository, SqlOrderRepository,
)

# Ids are server-assigned 64-bit keys; anything outside that range is malformed input
MAX_ENTITY_ID = 2**63 - 1
EntityIdPath = Annotated[int, Path(ge=1, le=MAX_ENTITY_ID)]

_uri_builder = UriBuilder()


def get_uri_builder() -> UriBuilder:
    return _uri_builder


async def get_employee_repository(
    db: AsyncSession = Depends(get_db),
) -> EmployeeRepository:
    return SqlEmployeeRepository(db)


async def get_order_repository(
    db: AsyncSession = Depends(get_db),
) -> OrderRepository:
    return SqlOrderRepository(db)


def get_employee_assembler(
    uris: UriBuilder = Depends(get_uri_builder),
) -> EmployeeModelAssembler:
    return EmployeeModelAssembler(uris)


def get_order_assembler(
    uris: UriBuilder = Depends(get_uri_builder),
) -> OrderModelAssembler:
    return OrderModelAssembler(uris)
