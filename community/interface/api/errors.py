"""Exception handlers mapping errors to JSON responses.

Every error body has the shape {"message": ...}.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from community.domain.error import (
    AuthenticationRequiredError,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error."

# Most specific classes first; lookup walks the exception's MRO
DOMAIN_ERROR_STATUS: dict[type[Exception], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    AuthenticationRequiredError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_403_FORBIDDEN,
}


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build a JSON error response."""
    return JSONResponse(
        status_code=status_code, content={"message": message}, headers=headers
    )


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate a domain error into its HTTP status."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for cls in type(exc).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            status_code = DOMAIN_ERROR_STATUS[cls]
            break
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return error_response(status_code, str(exc))


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """Summarize the first pydantic error as a client-facing message."""
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid request: {location}: {first.get('msg')}"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    return error_response(
        status.HTTP_400_BAD_REQUEST, describe_validation_errors(exc.errors())
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors (404, 405, ...) with a message field."""
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the client."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application."""
    for error_class in DOMAIN_ERROR_STATUS:
        app.add_exception_handler(error_class, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
