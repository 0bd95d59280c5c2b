"""
Domain errors and their translation to HTTP error responses.
"""
import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TaskManagementError(Exception):
    """Base class for errors raised by the domain services."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(TaskManagementError):
    """A referenced task or user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class DuplicateResourceError(TaskManagementError):
    """A unique value (user email) is already registered."""

    status_code = status.HTTP_409_CONFLICT


def error_body(
    status_code: int,
    message: str,
    path: str,
    error: Optional[str] = None,
    validation_errors: Optional[Dict[str, str]] = None,
) -> dict:
    """Build the error payload shared by every handler"""
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": error or HTTPStatus(status_code).phrase,
        "message": message,
        "path": path,
    }
    if validation_errors is not None:
        body["validationErrors"] = validation_errors
    return body


async def domain_exception_handler(request: Request, exc: TaskManagementError):
    """Handle NotFound / Duplicate errors raised by services"""
    logger.warning(f"{request.method} {request.url.path} - {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.message, request.url.path),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Collect per-field violations into validationErrors"""
    validation_errors = {}
    for err in exc.errors():
        loc = err.get("loc") or ("body",)
        # Malformed JSON is reported against the whole body, not a byte offset
        field = "body" if err.get("type") == "json_invalid" else str(loc[-1])
        # Keep the first violation reported for a field
        validation_errors.setdefault(field, err.get("msg", "Invalid value"))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            status.HTTP_400_BAD_REQUEST,
            "Input validation failed",
            request.url.path,
            error="Validation Failed",
            validation_errors=validation_errors,
        ),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, str(exc.detail), request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last resort handler, never leaks internal detail"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            request.url.path,
        ),
    )
