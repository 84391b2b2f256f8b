"""
Error mapping.

The only place where failure kinds become HTTP status codes. Client
bodies carry a user-safe message; internal detail goes to the log.
"""
import logging
from typing import List, Tuple, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.application.dtos import ErrorResponse
from core.domain.exceptions import (
    AuthError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases
STATUS_BY_ERROR: List[Tuple[Type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

INTERNAL_ERROR_MESSAGE = "Internal server error"


def status_for(exc: DomainError) -> int:
    """Return the HTTP status for a domain failure."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle typed failures raised by services and repositories.

    Args:
        request: FastAPI request
        exc: DomainError exception

    Returns:
        JSONResponse with the mapped status and a safe message
    """
    code = status_for(exc)
    if code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}",
            exc_info=exc,
        )
        return error_response(code, INTERNAL_ERROR_MESSAGE)

    logger.info(f"{request.method} {request.url.path} -> {code}: {exc.message}")
    return error_response(code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and path parameters as 400, not 422."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        problems.append(f"{location}: {message}" if location else message)

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "; ".join(problems) or "Invalid request",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything that escaped the typed error hierarchy."""
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
