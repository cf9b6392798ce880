"""SQL Repositories — EmployeeRepository / OrderRepository over an AsyncSession.

Invariants:
    - Records never escape: every method returns core entities
    - save() inserts when id is None, merges (upsert) when id is set, then commits
    - find_all() is ordered by id (see the EmployeeRepository Protocol)
    - delete_by_id() of an absent id is a no-op

Design Decisions:
    - One session per request (injected by get_db): the findById -> mutate -> save
      sequence is not wrapped in a transaction, last save wins
    - Shared _SqlRepository base: the two tables differ only in their mapping
"""

from typing import Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from payroll.core.domain_types import EmployeeId, OrderId, OrderStatus
from payroll.core.entities import Employee, Order
from payroll.db.base import Base
from payroll.models.employee import EmployeeRecord
from payroll.models.order import OrderRecord

RecordT = TypeVar("RecordT", bound=Base)
EntityT = TypeVar("EntityT", Employee, Order)


class _SqlRepository(Generic[RecordT, EntityT]):
    record_cls: type[RecordT]

    def __init__(self, db: AsyncSession):
        self.db = db

    def _to_entity(self, record: RecordT) -> EntityT:
        raise NotImplementedError

    def _to_record(self, entity: EntityT) -> RecordT:
        raise NotImplementedError

    async def find_all(self) -> list[EntityT]:
        result = await self.db.execute(
            select(self.record_cls).order_by(self.record_cls.id),
        )
        return [self._to_entity(r) for r in result.scalars().all()]

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        record = await self.db.get(self.record_cls, entity_id)
        return self._to_entity(record) if record else None

    async def save(self, entity: EntityT) -> EntityT:
        record = self._to_record(entity)
        if entity.id is None:
            self.db.add(record)
        else:
            record = await self.db.merge(record)
        await self.db.commit()
        return self._to_entity(record)

    async def delete_by_id(self, entity_id: int) -> None:
        await self.db.execute(
            delete(self.record_cls).where(self.record_cls.id == entity_id),
        )
        await self.db.commit()

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(self.record_cls),
        )
        return result.scalar_one()


class SqlEmployeeRepository(_SqlRepository[EmployeeRecord, Employee]):
    record_cls = EmployeeRecord

    def _to_entity(self, record: EmployeeRecord) -> Employee:
        return Employee(
            first_name=record.first_name,
            last_name=record.last_name,
            role=record.role,
            id=EmployeeId(record.id),
        )

    def _to_record(self, employee: Employee) -> EmployeeRecord:
        return EmployeeRecord(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            role=employee.role,
        )


class SqlOrderRepository(_SqlRepository[OrderRecord, Order]):
    record_cls = OrderRecord

    def _to_entity(self, record: OrderRecord) -> Order:
        return Order(
            description=record.description,
            status=OrderStatus(record.status),
            id=OrderId(record.id),
        )

    def _to_record(self, order: Order) -> OrderRecord:
        return OrderRecord(
            id=order.id,
            description=order.description,
            status=order.status.value,
        )
