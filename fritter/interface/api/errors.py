"""Exception handlers mapping domain errors to HTTP responses.

Every error response has the shape ``{"error": message}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from fritter.domain.error import (
    ConflictError,
    ContentTooLongError,
    DomainError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    StorageUnavailableError,
    UnauthenticatedError,
)

# Ordered most specific first: ContentTooLongError is an InvalidInputError
STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (UnauthenticatedError, status.HTTP_403_FORBIDDEN),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ContentTooLongError, status.HTTP_413_CONTENT_TOO_LARGE),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content={"error": message})


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    logfire.info(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
        status=code,
        error=str(exc),
    )
    return error_response(code, str(exc))


async def handle_storage_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error("Storage unavailable", path=request.url.path, error=str(exc))
    return error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE, str(StorageUnavailableError())
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request."
    logfire.info("Malformed request", path=request.url.path, error=message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(OperationalError, handle_storage_error)
    app.add_exception_handler(InterfaceError, handle_storage_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
