"""Error Handlers — render every failure as the registry's JSON error envelope.

Invariants:
    - EmployeeRegistryError → its own http_status and to_response() body
    - RequestValidationError → 400 VALIDATION_ERROR listing each bad field
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - Every envelope carries the request path so clients can correlate failures

Design Decisions:
    - Handlers are plain module functions registered from one table, so tests
      and main.py share the same mapping
    - Domain errors below 500 log at WARNING: conflicts and misses are client
      mistakes, not server faults
"""

import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from employee_registry.core.errors import (
    EmployeeRegistryError, ErrorCategory, ErrorSeverity,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Request, Any], Awaitable[JSONResponse]]


def _envelope(
    request: Request, code: str, message: str,
    category: ErrorCategory, severity: ErrorSeverity, **extra: Any,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "path": request.url.path,
            **extra,
        },
    }


async def handle_registry_error(
    request: Request, exc: EmployeeRegistryError,
) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level, f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "employee_id": exc.context.employee_id,
        },
    )
    body = exc.to_response()
    body["error"]["path"] = request.url.path
    return JSONResponse(status_code=exc.http_status, content=body)


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    problems = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Rejected malformed request to {request.url.path}: "
        f"{len(problems)} problem(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            request, "VALIDATION_ERROR", f"Invalid request to {request.url.path}",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=problems,
        ),
    )


async def handle_unexpected_error(
    request: Request, exc: Exception,
) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            request, "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


EXCEPTION_HANDLERS: dict[type[Exception], Handler] = {
    EmployeeRegistryError: handle_registry_error,
    RequestValidationError: handle_validation_error,
    Exception: handle_unexpected_error,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    for exc_type, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_type, handler)
