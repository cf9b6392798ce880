"""Error Handlers — global exception handlers for the payroll API.

Invariants:
    - EntityNotFoundError → 404 text/plain "Could not find {resource} {id}"
    - InvalidTransitionError → 405 application/problem+json
    - Other PayrollError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Handlers raise not-found and let this module format it: routes never
      build 404 bodies themselves
    - Most specific handler wins: Starlette walks the exception MRO
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from payroll.api.responses import not_found_response, problem_response
from payroll.core.errors import (
    EntityNotFoundError, ErrorSeverity, InvalidTransitionError, PayrollError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_not_found_handler(app)
    _register_invalid_transition_handler(app)
    _register_payroll_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_not_found_handler(app: FastAPI) -> None:

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info(
            exc.message,
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return not_found_response(exc)


def _register_invalid_transition_handler(app: FastAPI) -> None:

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition_handler(
        request: Request, exc: InvalidTransitionError,
    ):
        logger.info(
            exc.message,
            extra={
                "error_code": exc.code, "path": request.url.path,
                "status": exc.current_status.value, "action": exc.action,
            },
        )
        return problem_response(exc)


def _register_payroll_error_handler(app: FastAPI) -> None:
    """Register payroll domain/infrastructure error handler."""

    @app.exception_handler(PayrollError)
    async def payroll_error_handler(request: Request, exc: PayrollError):
        """Handle all remaining payroll domain/infrastructure errors."""
        logger.error(
            f"PayrollError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies, missing fields and bad path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
