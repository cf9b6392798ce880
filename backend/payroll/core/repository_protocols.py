"""Boundary Protocols — persistence contracts the resource handlers depend on.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - find_all returns a snapshot ordered by id, which is insertion order for
      server-assigned ids; an upsert at an explicit id sorts by that id
    - save assigns an id when absent and preserves it otherwise (upsert)
    - delete_by_id is silent when the id is absent

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL and in-memory variants
      share no base class
    - Async methods: implementations do IO; callers await them around pure logic
"""

from typing import Protocol

from payroll.core.domain_types import EmployeeId, OrderId
from payroll.core.entities import Employee, Order


class EmployeeRepository(Protocol):
    """Contract for employee persistence, implemented by infrastructure."""
    async def find_all(self) -> list[Employee]: ...
    async def find_by_id(self, employee_id: EmployeeId) -> Employee | None: ...
    async def save(self, employee: Employee) -> Employee: ...
    async def delete_by_id(self, employee_id: EmployeeId) -> None: ...
    async def count(self) -> int: ...


class OrderRepository(Protocol):
    """Contract for order persistence, implemented by infrastructure."""
    async def find_all(self) -> list[Order]: ...
    async def find_by_id(self, order_id: OrderId) -> Order | None: ...
    async def save(self, order: Order) -> Order: ...
    async def delete_by_id(self, order_id: OrderId) -> None: ...
    async def count(self) -> int: ...
