"""
Domain exceptions and the handlers that render them as JSON error envelopes.
"""
import enum
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from surplus_sales.schemas.common import ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal server error"

    def __init__(self, message: str = "", *, status_code: Optional[int] = None):
        super().__init__(message or self.error)
        self.message = message or self.error
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Validation failed"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    error = "Conflict"


class AuthFailure(str, enum.Enum):
    """Internal reason codes for a failed login. Only logged."""
    UNKNOWN_EMAIL = "unknown_email"
    WRONG_PASSWORD = "wrong_password"
    INACTIVE = "inactive"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"

    def __init__(self, message: str = "", *, reason: Optional[AuthFailure] = None):
        super().__init__(message)
        self.reason = reason


class InactiveAccountError(AuthenticationError):
    status_code = status.HTTP_403_FORBIDDEN
    error = "Forbidden"

    def __init__(self, message: str = "Account is inactive"):
        super().__init__(message, reason=AuthFailure.INACTIVE)


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    error = "Permission denied"


class StoreTimeoutError(AppError):
    error = "Internal server error"

    def __init__(self, message: str = "Database operation timed out"):
        super().__init__(message)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def error_body(status_code: int, error: str, message: str) -> dict:
    envelope = ErrorResponse(error=error, message=message, status_code=status_code, timestamp=_now())
    return envelope.model_dump(by_alias=True)


def success_body(message: Optional[str] = None, data=None) -> dict:
    envelope = SuccessResponse(message=message, data=data, timestamp=_now())
    return envelope.model_dump(mode="json", exclude_none=True)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        # Internal details stay in the log.
        message = "An unexpected error occurred"
    else:
        message = exc.message
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.error, message),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, detail, detail),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    malformed = any(err.get("type") == "json_invalid" for err in errors) or any(
        err.get("type") == "missing" and tuple(err.get("loc", ())) == ("body",) for err in errors
    )
    if malformed:
        code = status.HTTP_400_BAD_REQUEST
        return JSONResponse(
            status_code=code,
            content=error_body(code, "Invalid request body", "Request body is missing or is not valid JSON"),
        )

    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        code = status.HTTP_400_BAD_REQUEST
        return JSONResponse(
            status_code=code,
            content=error_body(code, "Invalid ID format", "Invalid ID format. ID must be an integer."),
        )

    code = status.HTTP_422_UNPROCESSABLE_ENTITY
    messages = []
    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{field}: {err.get('msg')}" if field else err.get("msg", "invalid"))
    return JSONResponse(
        status_code=code,
        content=error_body(code, "Validation failed", "; ".join(messages)),
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=code,
        content=error_body(code, "Internal server error", "An unexpected error occurred"),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=code,
        content=error_body(code, "Internal server error", "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
