"""Order Lifecycle — the order state machine and the affordances it exposes.

Invariants:
    - IN_PROGRESS is the only non-terminal status
    - complete: IN_PROGRESS -> COMPLETED; cancel: IN_PROGRESS -> CANCELLED
    - Any action on COMPLETED or CANCELLED raises InvalidTransitionError
    - allowed_actions() order is fixed: complete, then cancel

Design Decisions:
    - Transition table keyed by (status, action): adding a state means adding rows,
      not branches
    - apply_transition returns a new Order: callers decide when to persist
"""

from dataclasses import replace
from enum import Enum

from payroll.core.domain_types import OrderStatus
from payroll.core.entities import Order
from payroll.core.errors import InvalidTransitionError


class OrderAction(str, Enum):
    """State-changing actions, in affordance order."""
    COMPLETE = "complete"
    CANCEL = "cancel"


TRANSITIONS: dict[tuple[OrderStatus, OrderAction], OrderStatus] = {
    (OrderStatus.IN_PROGRESS, OrderAction.COMPLETE): OrderStatus.COMPLETED,
    (OrderStatus.IN_PROGRESS, OrderAction.CANCEL): OrderStatus.CANCELLED,
}


def allowed_actions(status: OrderStatus) -> tuple[OrderAction, ...]:
    """Actions legal from `status`, in declaration order of OrderAction."""
    return tuple(
        action for action in OrderAction
        if (OrderStatus(status), action) in TRANSITIONS
    )


def apply_transition(order: Order, action: OrderAction) -> Order:
    """Return a copy of `order` moved by `action`, or raise InvalidTransitionError."""
    target = TRANSITIONS.get((order.status, OrderAction(action)))
    if target is None:
        raise InvalidTransitionError(OrderAction(action).value, order.status)
    return replace(order, status=target)
