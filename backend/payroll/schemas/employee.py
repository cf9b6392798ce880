"""Employee Schemas — request body for POST and PUT /employees.

Invariants:
    - Either `name` or both `firstName` and `lastName` must be present
    - `name` wins when both forms are sent; it is split on the first space
    - A single-token `name` is rejected (no empty lastName)
    - Any `id` sent by the client is ignored: ids come from the store or the path

Design Decisions:
    - camelCase aliases with populate_by_name: JSON clients send firstName,
      Python callers may pass first_name
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from payroll.core.domain_types import EmployeeId
from payroll.core.entities import Employee, split_name


class EmployeeBody(BaseModel):
    """Employee write payload accepting the legacy `name` or split names."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, max_length=511)
    first_name: str | None = Field(None, alias="firstName", max_length=255)
    last_name: str | None = Field(None, alias="lastName", max_length=255)
    role: str = Field(max_length=255)

    @field_validator("name", "first_name", "last_name", "role")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be empty or whitespace")
        return v

    @model_validator(mode="after")
    def resolve_names(self):
        if self.name is not None:
            self.first_name, self.last_name = split_name(self.name)
        elif not (self.first_name and self.last_name):
            raise ValueError("either name or both firstName and lastName are required")
        return self

    def to_entity(self, employee_id: EmployeeId | None = None) -> Employee:
        return Employee(
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
            id=employee_id,
        )
