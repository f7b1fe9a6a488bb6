"""
Translation of domain errors into HTTP responses.

Every error leaves the API in the same envelope: path, timestamp, status code,
message and, outside production, diagnostic details.
"""

import logging
import traceback
import uuid
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.schemas.rentals import ErrorResponse
from app.config import get_settings
from app.domain.errors import (
    ConfigurationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"

# Most specific first
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _details(exc: Exception) -> str | None:
    if get_settings().is_production:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def build_error_response(
    request: Request,
    status_code: int,
    message: str,
    exc: Exception,
    error_id: str | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
        status_code=status_code,
        message=message,
        error_id=error_id,
        details=_details(exc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        error_id = str(uuid.uuid4())
        logger.error(
            "Internal domain error",
            exc_info=exc,
            extra={"error_id": error_id, "code": exc.code, "path": request.url.path},
        )
        return build_error_response(request, status_code, INTERNAL_ERROR_MESSAGE, exc, error_id)

    logger.info(
        "Request rejected",
        extra={"code": exc.code, "status_code": status_code, "path": request.url.path},
    )
    return build_error_response(request, status_code, exc.message, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler: logs the full error with an id and returns a generic
    message so stack traces never reach production clients.
    """
    error_id = str(uuid.uuid4())
    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        },
    )
    return build_error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, exc, error_id
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
