"""In-Memory Repositories — dict-backed EmployeeRepository / OrderRepository.

Invariants:
    - find_all orders by id, same as the SQL repositories
    - Ids are assigned monotonically; an explicit id above the counter advances it
    - Callers only ever hold copies: mutating a returned entity never touches the store
    - Writes are serialized by an asyncio.Lock; reads take no lock

Design Decisions:
    - Used by tests and for running the API without a database
"""

import asyncio
from dataclasses import replace
from typing import Generic, TypeVar

from payroll.core.entities import Employee, Order

EntityT = TypeVar("EntityT", Employee, Order)


class _InMemoryRepository(Generic[EntityT]):

    def __init__(self):
        self._rows: dict[int, EntityT] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def find_all(self) -> list[EntityT]:
        return [replace(self._rows[k]) for k in sorted(self._rows)]

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        entity = self._rows.get(entity_id)
        return replace(entity) if entity else None

    async def save(self, entity: EntityT) -> EntityT:
        async with self._lock:
            entity_id = entity.id if entity.id is not None else self._last_id + 1
            self._last_id = max(self._last_id, entity_id)
            stored = replace(entity, id=entity_id)
            self._rows[entity_id] = stored
            return replace(stored)

    async def delete_by_id(self, entity_id: int) -> None:
        async with self._lock:
            self._rows.pop(entity_id, None)

    async def count(self) -> int:
        return len(self._rows)


class InMemoryEmployeeRepository(_InMemoryRepository[Employee]):
    pass


class InMemoryOrderRepository(_InMemoryRepository[Order]):
    pass
