"""Domain Types — identity types and the enums shared by the whole service.

Invariants:
    - EmployeeId, OrderId wrap int, server-assigned, never client-chosen on POST
    - OrderStatus values equal their names (the DB stores the enum name)
    - LinkRelation holds every relation name a document may carry

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)
OrderId = NewType("OrderId", int)


# ─── Enums ───────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle states, mapped to the `orders.status` column."""
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class LinkRelation(str, Enum):
    """Relation names used as keys of `_links`."""
    SELF = "self"
    EMPLOYEES = "employees"
    ORDERS = "orders"
    COMPLETE = "complete"
    CANCEL = "cancel"
