"""Entities — in-memory shape and invariants of Employee and Order.

Invariants:
    - first_name, last_name, role, description are non-empty after stripping
    - Employee.name == first_name + " " + last_name
    - Writing Employee.name splits on the first space; a single token is rejected
    - Equality covers id and every data field; hash is stable while the entity is not mutated
    - A new Order starts IN_PROGRESS

Design Decisions:
    - Plain dataclasses, not ORM records: the core never sees SQLAlchemy
    - Explicit __hash__ on mutable dataclasses: equality stays field-wise and
      entities can still live in sets for as long as they are not mutated
"""

from dataclasses import dataclass

from payroll.core.domain_types import EmployeeId, OrderId, OrderStatus


def _require_text(value: str, field_name: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string")
    return value.strip()


def split_name(name: str) -> tuple[str, str]:
    """Split a full name on its first space into (first_name, last_name).

    "Bilbo Baggins" -> ("Bilbo", "Baggins"); "Mary Jane Watson" ->
    ("Mary", "Jane Watson"). Raises ValueError for a single token.
    """
    first, sep, rest = _require_text(name, "name").partition(" ")
    rest = rest.strip()
    if not sep or not rest:
        raise ValueError(
            f"name must contain a first and a last name separated by a space, got {name!r}",
        )
    return first, rest


@dataclass(eq=True)
class Employee:
    """Employee entity: firstName/lastName/role plus derived name."""

    first_name: str
    last_name: str
    role: str
    id: EmployeeId | None = None

    def __post_init__(self):
        self.first_name = _require_text(self.first_name, "first_name")
        self.last_name = _require_text(self.last_name, "last_name")
        self.role = _require_text(self.role, "role")

    @classmethod
    def from_name(
        cls, name: str, role: str, id: EmployeeId | None = None,
    ) -> "Employee":
        first_name, last_name = split_name(name)
        return cls(first_name=first_name, last_name=last_name, role=role, id=id)

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @name.setter
    def name(self, value: str) -> None:
        self.first_name, self.last_name = split_name(value)

    def __hash__(self) -> int:
        return hash((self.id, self.first_name, self.last_name, self.role))


@dataclass(eq=True)
class Order:
    """Order entity: description plus lifecycle status."""

    description: str
    status: OrderStatus = OrderStatus.IN_PROGRESS
    id: OrderId | None = None

    def __post_init__(self):
        self.description = _require_text(self.description, "description")
        self.status = OrderStatus(self.status)

    def __hash__(self) -> int:
        return hash((self.id, self.description, self.status))
