"""
Exception handlers.

Maps module exceptions to HTTP responses in one place. Every error body is
``{"message": ...}``; unexpected errors also carry ``stack`` outside
production.
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.config import get_settings
from shared.exceptions import (
    SaarthiError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
)
from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins.
STATUS_BY_ERROR: tuple[tuple[type[SaarthiError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
)


def status_for(error: SaarthiError) -> int:
    """HTTP status for a module exception; 500 if unmapped."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    body = ErrorResponse(message=message, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def handle_saarthi_error(request: Request, exc: SaarthiError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("Unmapped error on %s %s: %s", request.method, request.url.path, exc.to_dict())
    else:
        logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.code)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    response = _error(status_code, exc.message)
    if headers:
        response.headers.update(headers)
    return response


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _error(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    if get_settings().is_production:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or exc.__class__.__name__,
        stack="".join(traceback.format_exception(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(SaarthiError, handle_saarthi_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
