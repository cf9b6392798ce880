"""ORM Records — SQLAlchemy declarative models for the two persisted tables.

Invariants:
    - All records inherit from Base (db/base.py)
    - Records never leave infrastructure/: repositories map them to core entities

Design Decisions:
    - One file per table for locality
    - All records imported here so Base.metadata is complete before create_all
"""

from payroll.models.employee import EmployeeRecord  # noqa: F401
from payroll.models.order import OrderRecord  # noqa: F401
