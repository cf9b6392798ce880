"""Response Helpers — Problem envelope and plain-text not-found bodies.

Invariants:
    - Problem responses use Content-Type application/problem+json
    - Not-found responses are text/plain with the error message as the whole body
"""

from fastapi.responses import JSONResponse, PlainTextResponse

from payroll.core.errors import EntityNotFoundError, InvalidTransitionError

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ProblemResponse(JSONResponse):
    media_type = PROBLEM_MEDIA_TYPE


def problem_response(exc: InvalidTransitionError) -> ProblemResponse:
    return ProblemResponse(status_code=exc.http_status, content=exc.to_problem())


def not_found_response(exc: EntityNotFoundError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.http_status)
