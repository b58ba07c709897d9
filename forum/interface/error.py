"""Interface layer errors and their HTTP translation.

Domain errors carry stable kinds; this module is the only place that turns
them into status codes and user-facing messages.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from forum.domain.error import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from forum.persistence.error import IntegrityError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Raised when a request lacks a valid bearer token."""

    def __init__(self, message: str = "Missing authentication"):
        self.message = message
        super().__init__(message)


VALIDATION_MESSAGES: dict[str, str] = {
    "NEW_THREAD.NOT_CONTAIN_NEEDED_PROPERTY": "tidak dapat membuat thread baru karena properti yang dibutuhkan tidak ada",
    "NEW_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION": "tidak dapat membuat thread baru karena tipe data tidak sesuai",
    "NEW_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": "tidak dapat membuat komentar baru karena properti yang dibutuhkan tidak ada",
    "NEW_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": "tidak dapat membuat komentar baru karena tipe data tidak sesuai",
    "NEW_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": "tidak dapat membuat balasan baru karena properti yang dibutuhkan tidak ada",
    "NEW_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": "tidak dapat membuat balasan baru karena tipe data tidak sesuai",
}

RESOURCE_NAMES: dict[str, str] = {
    "thread": "thread",
    "comment": "komentar",
    "reply": "balasan",
}

SERVER_ERROR_MESSAGE = "terjadi kegagalan pada server kami"
MALFORMED_REQUEST_MESSAGE = "permintaan tidak dapat diproses karena format tidak sesuai"


def translate_domain_error(error: DomainError) -> tuple[int, str]:
    """Map a domain error to an HTTP status code and message.

    Args:
        error: Error raised by a use case

    Returns:
        Tuple of status code and user-facing message
    """
    if isinstance(error, ValidationError):
        return (
            status.HTTP_400_BAD_REQUEST,
            VALIDATION_MESSAGES.get(error.code, error.code),
        )
    if isinstance(error, NotFoundError):
        name = RESOURCE_NAMES.get(error.resource, error.resource)
        return status.HTTP_404_NOT_FOUND, f"{name} tidak ditemukan"
    if isinstance(error, AuthorizationError):
        return (
            status.HTTP_403_FORBIDDEN,
            "anda tidak berhak mengakses resource ini",
        )
    return status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code, message = translate_domain_error(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Unexpected domain error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status_code,
            content={"status": "error", "message": message},
        )
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        status_code=status_code,
        error=str(exc),
    )
    return _fail(status_code, message)


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logfire.warn("Conflicting write", path=request.url.path, error=str(exc))
    return _fail(status.HTTP_409_CONFLICT, "permintaan bertentangan dengan data yang ada")


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn(
        "Malformed request",
        path=request.url.path,
        error_types=[error["type"] for error in exc.errors()],
    )
    return _fail(status.HTTP_400_BAD_REQUEST, MALFORMED_REQUEST_MESSAGE)


async def handle_authentication_error(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={
            "statusCode": status.HTTP_401_UNAUTHORIZED,
            "error": "Unauthorized",
            "message": exc.message,
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers translating errors into responses.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(AuthenticationError, handle_authentication_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
