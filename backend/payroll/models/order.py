"""Order ORM — row shape of the `orders` table.

Invariants:
    - status holds the OrderStatus name (IN_PROGRESS, COMPLETED, CANCELLED)

Design Decisions:
    - Table named `orders`: ORDER is a reserved word in SQL
    - String column instead of a native enum type: no migration needed to add a status
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from payroll.core.domain_types import OrderStatus
from payroll.db.base import Base


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=OrderStatus.IN_PROGRESS.value,
    )
