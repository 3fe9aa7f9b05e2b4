"""
Application error taxonomy and the JSON error envelope.

Every failure leaves the API as ``{"success": false, "error": <kind>, "message": <text>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import ConnectionFailure

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind: str = "ServerError"
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "InvalidInput"
    default_message = "Invalid request body"


class DuplicateUser(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "DuplicateUser"
    default_message = "User already exists"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "InvalidCredentials"
    default_message = "Invalid email or password"


class InvalidToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "InvalidToken"
    default_message = "Invalid or expired token"


class InvalidIdentifier(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "InvalidIdentifier"
    default_message = "Invalid id"


class UpdateFailed(AppError):
    kind = "UpdateFailed"
    default_message = "Error updating relief goods"


class StoreUnavailable(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    kind = "StoreUnavailable"
    default_message = "Database unavailable"


def error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": kind, "message": message},
    )


def register_exception_handlers(app: FastAPI, is_production: bool = False) -> None:
    """Attach the envelope handlers for AppError, validation, store and unexpected failures."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.kind, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
            message = f"{field}: {first.get('msg')}" if field else first.get("msg")
        else:
            message = InvalidInput.default_message
        return error_response(InvalidInput.status_code, InvalidInput.kind, message)

    @app.exception_handler(ConnectionFailure)
    async def store_error_handler(request: Request, exc: ConnectionFailure):
        logger.error("Database unavailable during %s %s: %s", request.method, request.url.path, exc)
        return error_response(StoreUnavailable.status_code, StoreUnavailable.kind, StoreUnavailable.default_message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        message = "Internal server error" if is_production else str(exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, AppError.kind, message)
