"""
Exception handlers.

Maps the shared exception bases to HTTP status codes. Every error body has
the shape ``{"error": <message>, "code": <CODE>, "details": {...}}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    SlotdeskError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Privileged operations answer malformed bodies with a plain 400 error body
ADMIN_PATH_PREFIX = "/api/admin/"

STATUS_BY_ERROR: list[tuple[type[SlotdeskError], int]] = [
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
    (ConflictError, 409),
    (ExternalServiceError, 502),
]


def status_for(error: SlotdeskError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


async def slotdesk_error_handler(request: Request, exc: SlotdeskError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code)

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def admin_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 with the shared error body under /api/admin; FastAPI's 422 elsewhere."""
    if not request.url.path.startswith(ADMIN_PATH_PREFIX):
        return await request_validation_exception_handler(request, exc)

    fields = [".".join(str(part) for part in error["loc"][1:]) for error in exc.errors()]
    error = ValidationError(
        "Invalid request: " + ", ".join(fields) if fields else "Invalid request",
        code="INVALID_REQUEST",
        details={"fields": fields},
    )
    return JSONResponse(status_code=400, content=error.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SlotdeskError, slotdesk_error_handler)
    app.add_exception_handler(RequestValidationError, admin_validation_error_handler)
