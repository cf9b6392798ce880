"""Seed Loader — one-shot demo data inserted before the API accepts traffic.

Invariants:
    - Runs at most once per process, from the lifespan, before serving
    - Skipped when the employee store already holds rows (persistent embedded DB)

Design Decisions:
    - Works against the repository Protocols: same loader for SQL and in-memory stores
"""

import logging

from payroll.core.domain_types import OrderStatus
from payroll.core.entities import Employee, Order
from payroll.core.repository_protocols import EmployeeRepository, OrderRepository

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    ("Bilbo Baggins", "burglar"),
    ("Frodo Baggins", "thief"),
)
DEMO_ORDERS = (
    ("MacBook Pro", OrderStatus.COMPLETED),
    ("iPhone", OrderStatus.IN_PROGRESS),
)


async def load_demo_data(
    employees: EmployeeRepository, orders: OrderRepository,
) -> bool:
    """Insert demo employees and orders. Returns False when skipped."""
    if await employees.count() > 0:
        logger.info("Seed skipped: employee table already populated")
        return False

    for name, role in DEMO_EMPLOYEES:
        saved = await employees.save(Employee.from_name(name, role))
        logger.info(f"Preloading {saved}", extra={"employee_id": saved.id})

    for description, status in DEMO_ORDERS:
        saved = await orders.save(Order(description, status))
        logger.info(
            f"Preloading {saved}",
            extra={"order_id": saved.id, "status": saved.status.value},
        )
    return True
