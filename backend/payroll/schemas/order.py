"""Order Schemas — request body for POST /orders.

Invariants:
    - description is stripped and non-empty
    - status (or any other field) in the body is ignored: new orders are IN_PROGRESS
"""

from pydantic import BaseModel, Field, field_validator

from payroll.core.entities import Order


class OrderCreate(BaseModel):
    """Order creation payload."""
    description: str = Field(max_length=255)

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description cannot be empty or whitespace")
        return v

    def to_entity(self) -> Order:
        return Order(description=self.description)
