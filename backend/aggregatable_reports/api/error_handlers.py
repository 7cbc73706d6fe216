"""Error Handlers: global exception handlers for the report conversion API.

Invariants:
    - ReportError → its own to_response() envelope and http_status
    - RequestValidationError → 400 with per-field details (report JSON did not parse)
    - Exception (catch-all) → 500, never leaks internal details
    - Report errors log at WARNING, defects at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from aggregatable_reports.core.errors import (
    ErrorCategory, ErrorSeverity, ReportError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ReportError, report_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def report_error_handler(request: Request, exc: ReportError):
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "report_id": exc.context.report_id,
            "payload_index": exc.context.payload_index,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        f"Malformed report body on {request.url.path}: {len(exc.errors())} error(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "VALIDATION_ERROR", "Invalid report JSON",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details,
        ),
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all: never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _error_body(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    body = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        body["details"] = details
    return {"error": body}
