"""URI Builder — explicit route table keyed by handler identifier.

Invariants:
    - Route values are the path templates the routers are registered with
    - build() returns an absolute-path URI ("/orders/1"), never a full URL
    - Missing path variables raise ValueError; extra ones are rejected too

Design Decisions:
    - Route enum shared by routers and assemblers: one source for every path,
      no reflection over handler functions to discover links
    - Optional base_path so the API can be mounted under a prefix without
      touching the assemblers
"""

import string
from enum import Enum


class Route(str, Enum):
    """Handler identifiers, valued by their path template."""
    EMPLOYEES = "/employees"
    EMPLOYEE = "/employees/{employee_id}"
    ORDERS = "/orders"
    ORDER = "/orders/{order_id}"
    ORDER_COMPLETE = "/orders/{order_id}/complete"
    ORDER_CANCEL = "/orders/{order_id}/cancel"

    @property
    def variables(self) -> frozenset[str]:
        return frozenset(
            name for _, name, _, _ in string.Formatter().parse(self.value) if name
        )


class UriBuilder:
    """Formats Route templates into absolute-path URIs."""

    def __init__(self, base_path: str = ""):
        self.base_path = base_path.rstrip("/")

    def build(self, route: Route, **path_vars: object) -> str:
        expected = route.variables
        given = frozenset(path_vars)
        if given != expected:
            raise ValueError(
                f"Route {route.name} expects {sorted(expected)}, got {sorted(given)}",
            )
        return self.base_path + route.value.format(**path_vars)
