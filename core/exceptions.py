"""Application error taxonomy and the FastAPI handlers that render it.

Every error leaves the API as ``{"error": <kind>, "message": <text>}`` with the
status code of its kind.
"""
import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError
from starlette import status

logger = logging.getLogger("uvicorn.error")


class AppError(Exception):
    kind = "AppError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class InvalidInput(AppError):
    kind = "InvalidInput"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class InvalidTarget(AppError):
    kind = "InvalidTarget"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid target user"


class InvalidCredentials(AppError):
    kind = "InvalidCredentials"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class Unauthenticated(AppError):
    kind = "Unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class Unauthorized(AppError):
    kind = "Unauthorized"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed"


class NotFound(AppError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class DuplicateRequest(AppError):
    kind = "DuplicateRequest"
    status_code = status.HTTP_409_CONFLICT
    default_message = "A connection request already exists between these users"


class DuplicateEmail(AppError):
    kind = "DuplicateEmail"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email is already registered"


class InvalidState(AppError):
    kind = "InvalidState"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Connection request cannot be reviewed in its current state"


class StoreUnavailable(AppError):
    kind = "StoreUnavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Storage is temporarily unavailable, please retry"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid input"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return await app_error_handler(request, InvalidInput(message))


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return await app_error_handler(request, StoreUnavailable())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(OperationalError, store_error_handler)
    app.add_exception_handler(InterfaceError, store_error_handler)
