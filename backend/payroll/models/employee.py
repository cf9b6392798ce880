"""Employee ORM — row shape of the `employee` table.

Invariants:
    - id is an integer primary key assigned by the database
    - first_name, last_name, role are non-nullable
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from payroll.db.base import Base


class EmployeeRecord(Base):
    __tablename__ = "employee"

    # BigInteger on PostgreSQL, INTEGER on SQLite so rowid autoincrement applies
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)
