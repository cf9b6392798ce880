"""Error Hierarchy — typed, categorized exceptions for every payroll failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found messages are stable phrases: "Could not find {resource} {id}"
    - InvalidTransitionError always maps to 405, never 400 or 409
    - to_response() produces the generic JSON envelope; to_problem() the Problem envelope

Design Decisions:
    - Single hierarchy with PayrollError base: the global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from payroll.core.domain_types import OrderStatus


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: int | None = None


class PayrollError(Exception):
    """Base exception for all payroll errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EntityNotFoundError(PayrollError):
    """Requested entity does not exist. Rendered as plain text."""
    def __init__(
        self, resource: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"Could not find {resource} {resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource = resource
        self.resource_id = resource_id


class EmployeeNotFoundError(EntityNotFoundError):
    def __init__(self, employee_id: int, context: ErrorContext | None = None):
        super().__init__("employee", employee_id, context)


class OrderNotFoundError(EntityNotFoundError):
    def __init__(self, order_id: int, context: ErrorContext | None = None):
        super().__init__("order", order_id, context)


class InvalidTransitionError(PayrollError):
    """complete/cancel attempted on an order that is no longer IN_PROGRESS."""

    PROBLEM_TITLE = "Method not allowed"

    def __init__(
        self,
        action: str,
        current_status: OrderStatus,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"You can't {action} an order that is in the "
            f"{OrderStatus(current_status).value} status",
            "INVALID_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 405,
        )
        self.action = action
        self.current_status = OrderStatus(current_status)

    def to_problem(self) -> dict:
        """Problem envelope (application/problem+json)."""
        return {
            "title": self.PROBLEM_TITLE,
            "detail": self.message,
            "status": self.http_status,
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PayrollError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
