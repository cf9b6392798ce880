"""Model Assemblers — turn entities into hypermedia documents.

Invariants:
    - Pure: no repository access, no request object, no IO
    - Same entity state -> identical document (dict order is fixed)
    - Link order: self, collection relation, then state-dependent affordances
    - Order documents carry complete/cancel iff status is IN_PROGRESS
    - Collection documents carry _embedded.<relation> (possibly empty) and a self link

Design Decisions:
    - Entity fields flattened next to _links (HAL style): clients read
      `doc["status"]`, not `doc["data"]["status"]`
    - UriBuilder injected: hrefs come from the route table, not persisted values
"""

from typing import Iterable

from payroll.core.domain_types import LinkRelation
from payroll.core.entities import Employee, Order
from payroll.core.order_lifecycle import OrderAction, allowed_actions
from payroll.core.uri_builder import Route, UriBuilder

LINKS = "_links"
EMBEDDED = "_embedded"

_ACTION_ROUTES = {
    OrderAction.COMPLETE: (LinkRelation.COMPLETE, Route.ORDER_COMPLETE),
    OrderAction.CANCEL: (LinkRelation.CANCEL, Route.ORDER_CANCEL),
}


def build_links(links: Iterable[tuple[LinkRelation, str]]) -> dict:
    """{relation: {"href": uri}} preserving the given order."""
    return {relation.value: {"href": href} for relation, href in links}


def employee_data(employee: Employee) -> dict:
    return {
        "id": employee.id,
        "firstName": employee.first_name,
        "lastName": employee.last_name,
        "role": employee.role,
        "name": employee.name,
    }


def order_data(order: Order) -> dict:
    return {
        "id": order.id,
        "description": order.description,
        "status": order.status.value,
    }


class EmployeeModelAssembler:
    """Employee -> document with self and employees links."""

    def __init__(self, uris: UriBuilder):
        self.uris = uris

    def to_model(self, employee: Employee) -> dict:
        document = employee_data(employee)
        document[LINKS] = build_links([
            (LinkRelation.SELF, self.uris.build(Route.EMPLOYEE, employee_id=employee.id)),
            (LinkRelation.EMPLOYEES, self.uris.build(Route.EMPLOYEES)),
        ])
        return document

    def to_collection_model(self, employees: Iterable[Employee]) -> dict:
        return {
            EMBEDDED: {
                LinkRelation.EMPLOYEES.value: [self.to_model(e) for e in employees],
            },
            LINKS: build_links([
                (LinkRelation.SELF, self.uris.build(Route.EMPLOYEES)),
            ]),
        }


class OrderModelAssembler:
    """Order -> document whose affordances follow the order's status."""

    def __init__(self, uris: UriBuilder):
        self.uris = uris

    def to_model(self, order: Order) -> dict:
        links = [
            (LinkRelation.SELF, self.uris.build(Route.ORDER, order_id=order.id)),
            (LinkRelation.ORDERS, self.uris.build(Route.ORDERS)),
        ]
        for action in allowed_actions(order.status):
            relation, route = _ACTION_ROUTES[action]
            links.append((relation, self.uris.build(route, order_id=order.id)))
        document = order_data(order)
        document[LINKS] = build_links(links)
        return document

    def to_collection_model(self, orders: Iterable[Order]) -> dict:
        return {
            EMBEDDED: {
                LinkRelation.ORDERS.value: [self.to_model(o) for o in orders],
            },
            LINKS: build_links([
                (LinkRelation.SELF, self.uris.build(Route.ORDERS)),
            ]),
        }
