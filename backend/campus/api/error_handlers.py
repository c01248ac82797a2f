"""Error Handlers - REST exception handlers for the plain REST routes.

Invariants:
    - CampusError -> its own http_status with the to_response() envelope
    - RequestValidationError -> 400 with one detail entry per offending field
    - Any other Exception -> 500 with a fixed message, details only in the log
    - Every envelope carries the request path

Design Decisions:
    - GraphQL errors never reach these handlers (strawberry answers 200 with an
      errors array shaped by DomainErrorExtension); they cover plain routes only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from campus.core.errors import CampusError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

_LOG_LEVEL_BY_SEVERITY = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Attach the three handlers, most specific first."""
    app.add_exception_handler(CampusError, handle_campus_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)


async def handle_campus_error(request: Request, exc: CampusError) -> JSONResponse:
    logger.log(
        _LOG_LEVEL_BY_SEVERITY.get(exc.severity, logging.ERROR),
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    body = exc.to_response()
    body["error"]["path"] = request.url.path
    return JSONResponse(status_code=exc.http_status, content=body)


async def handle_request_validation(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Rejected request body on {request.url.path} ({len(details)} issue(s))",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            request,
            code="VALIDATION_ERROR",
            message="Invalid request data",
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.WARNING,
            details=details,
        ),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            request,
            code="INTERNAL_ERROR",
            message="An unexpected error occurred",
            category=ErrorCategory.INTERNAL,
            severity=ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    request: Request,
    *,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        "path": request.url.path,
    }
    if details is not None:
        error["details"] = details
    return {"error": error}
