"""Model Assemblers — entity -> hypermedia document.

Tests cover:
    - Employee document fields and self/employees links
    - Order affordances follow status (complete/cancel iff IN_PROGRESS)
    - Canonical link order
    - Collection envelopes (_embedded + self), including empty ones
    - Determinism: same entity -> identical JSON bytes
"""

import json

import pytest

from payroll.core.assembler import EmployeeModelAssembler, OrderModelAssembler
from payroll.core.domain_types import EmployeeId, OrderId, OrderStatus
from payroll.core.entities import Employee, Order
from payroll.core.uri_builder import UriBuilder


@pytest.fixture
def employee_assembler():
    return EmployeeModelAssembler(UriBuilder())


@pytest.fixture
def order_assembler():
    return OrderModelAssembler(UriBuilder())


def _bilbo():
    return Employee("Bilbo", "Baggins", "burglar", id=EmployeeId(1))


# --- employees ----------------------------------------------------------------

def test_employee_document_fields(employee_assembler):
    doc = employee_assembler.to_model(_bilbo())
    assert doc["id"] == 1
    assert doc["firstName"] == "Bilbo"
    assert doc["lastName"] == "Baggins"
    assert doc["role"] == "burglar"
    assert doc["name"] == "Bilbo Baggins"


def test_employee_document_links(employee_assembler):
    doc = employee_assembler.to_model(_bilbo())
    assert doc["_links"] == {
        "self": {"href": "/employees/1"},
        "employees": {"href": "/employees"},
    }
    assert list(doc["_links"]) == ["self", "employees"]


def test_employee_collection(employee_assembler):
    frodo = Employee("Frodo", "Baggins", "thief", id=EmployeeId(2))
    doc = employee_assembler.to_collection_model([_bilbo(), frodo])
    assert doc["_links"] == {"self": {"href": "/employees"}}
    items = doc["_embedded"]["employees"]
    assert [i["id"] for i in items] == [1, 2]
    assert items[1]["_links"]["self"]["href"] == "/employees/2"


def test_empty_employee_collection(employee_assembler):
    doc = employee_assembler.to_collection_model([])
    assert doc == {
        "_embedded": {"employees": []},
        "_links": {"self": {"href": "/employees"}},
    }


# --- orders -------------------------------------------------------------------

def test_in_progress_order_advertises_transitions(order_assembler):
    doc = order_assembler.to_model(Order("MacBook", id=OrderId(1)))
    assert list(doc["_links"]) == ["self", "orders", "complete", "cancel"]
    assert doc["_links"]["complete"]["href"] == "/orders/1/complete"
    assert doc["_links"]["cancel"]["href"] == "/orders/1/cancel"


@pytest.mark.parametrize("status", [OrderStatus.COMPLETED, OrderStatus.CANCELLED])
def test_terminal_order_only_self_and_orders(order_assembler, status):
    doc = order_assembler.to_model(Order("MacBook", status, id=OrderId(4)))
    assert doc["_links"] == {
        "self": {"href": "/orders/4"},
        "orders": {"href": "/orders"},
    }


def test_order_document_fields(order_assembler):
    doc = order_assembler.to_model(Order("iPhone", OrderStatus.CANCELLED, id=OrderId(2)))
    assert doc["id"] == 2
    assert doc["description"] == "iPhone"
    assert doc["status"] == "CANCELLED"


def test_order_collection(order_assembler):
    orders = [
        Order("MacBook Pro", OrderStatus.COMPLETED, id=OrderId(1)),
        Order("iPhone", id=OrderId(2)),
    ]
    doc = order_assembler.to_collection_model(orders)
    assert doc["_links"] == {"self": {"href": "/orders"}}
    embedded = doc["_embedded"]["orders"]
    assert "complete" not in embedded[0]["_links"]
    assert "complete" in embedded[1]["_links"]


def test_documents_are_deterministic(order_assembler):
    order = Order("MacBook", id=OrderId(1))
    first = json.dumps(order_assembler.to_model(order))
    second = json.dumps(order_assembler.to_model(Order("MacBook", id=OrderId(1))))
    assert first == second
