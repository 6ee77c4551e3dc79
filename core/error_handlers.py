"""Exception handlers for the FastAPI application.

Every error leaves the API in one envelope:

    {"error": {"type": ..., "message": ..., "status_code": ..., "details": {...}}}

`type` is the raising exception's `error_type` (`not_found`, `forbidden`,
`conflict`, ...) so clients can branch without parsing messages.
"""

from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")

# request parts FastAPI prefixes to validation error locations
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def error_response(
    status_code: int,
    error_type: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the JSON error envelope."""
    body = {
        "type": error_type,
        "message": message,
        "status_code": status_code,
    }
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


def _field_name(loc) -> str:
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render an `AppException` with its own status, type and details.

    Server-side failures are logged as errors, client mistakes as warnings.
    """
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s %s", exc.error_type, request.method, request.url.path, exc.message, exc.details)
    else:
        logger.warning("%s on %s %s: %s", exc.error_type, request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.error_type, exc.message, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report payload and parameter errors field by field (422).

    The message names the first offending field; `details.validation_errors`
    lists all of them with the request part stripped from the field path.
    """
    errors = [
        {"field": _field_name(error["loc"]), "message": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning("Invalid request on %s %s: %s", request.method, request.url.path, errors)

    message = "Invalid request"
    if errors:
        message = f"Invalid request: {errors[0]['field']}: {errors[0]['message']}"
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "request_validation_error",
        message,
        {"validation_errors": errors},
    )


async def integrity_exception_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Map constraint violations that escaped the services to 409 conflicts."""
    reason = str(exc.orig)
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, reason)

    if "UNIQUE" in reason.upper() or "DUPLICATE" in reason.upper():
        message = "A record with the same unique values already exists"
        constraint = "unique"
    elif "FOREIGN KEY" in reason.upper():
        message = "The record is still referenced or references missing data"
        constraint = "foreign_key"
    else:
        message = "The request conflicts with existing data"
        constraint = "other"
    return error_response(status.HTTP_409_CONFLICT, "conflict", message, {"constraint": constraint})


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Hide database internals behind a generic 500."""
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "database_error",
        "A database error occurred",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An internal server error occurred",
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app.

    Handlers are matched on the most specific exception class, so
    `IntegrityError` wins over its base `SQLAlchemyError`.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
