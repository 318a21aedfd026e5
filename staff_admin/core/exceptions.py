"""
Global exception handling for the application.
Every failure leaves the API as a sanitized ``{"message", "error"}`` pair,
where ``error`` is one of a fixed set of codes.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from staff_admin.application.services.auth_service import (
    TOKEN_COOKIE,
    ValidToken,
    extract_token,
    verify_token,
)

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""

    code = "server_error"

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        if code is not None:
            self.code = code
        super().__init__(self.message)


class UnauthorizedException(AppError):
    """Authentication failure error."""

    code = "unauthorized"

    def __init__(self, message: str = "Unauthorized access. Invalid or missing token.", code: Optional[str] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, code)


class ForbiddenException(AppError):
    """Authorization failure error."""

    code = "forbidden"

    def __init__(self, message: str = "Unauthorized access. Admin privileges required.", code: Optional[str] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, code)


class BadInputException(AppError):
    """Malformed or missing request data."""

    code = "bad_input"

    def __init__(self, message: str = "Invalid request", code: Optional[str] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, code)


class ConflictException(AppError):
    """Duplicate entity error. Kept on 400 for existing admin panel clients."""

    code = "conflict"

    def __init__(self, message: str = "Entity already exists", code: Optional[str] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, code)


class EntityNotFoundException(AppError):
    """Resource not found error."""

    code = "not_found"

    def __init__(self, message: str = "Entity not found", code: Optional[str] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, code)


class ServerErrorException(AppError):
    """Unexpected store or runtime failure, already logged where it happened."""

    code = "server_error"

    def __init__(self, message: str = "An unexpected error occurred. Please try again later."):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_body(message: str, code: str) -> Dict[str, Any]:
    return {"message": message, "error": code}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Request failed", path=request.url.path, error=exc.code)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.code))


def _has_valid_token(request: Request) -> bool:
    token = extract_token(request.headers.get("Authorization"), request.cookies.get(TOKEN_COOKIE))
    return isinstance(verify_token(token, request.app.state.settings), ValidToken)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/query validation errors are reported as 400, not 422."""
    # Body parsing happens before auth dependencies run; keep 401 ahead of 400
    if not _has_valid_token(request):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=error_body(UnauthorizedException().message, UnauthorizedException.code),
        )

    errors = exc.errors()
    logger.warning("Invalid request", path=request.url.path, errors=len(errors))

    if any("workingHours" in err.get("loc", ()) for err in errors):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid workingHours format", "invalid_working_hours"),
        )

    fields = sorted({".".join(str(p) for p in err.get("loc", ())[1:]) for err in errors} - {""})
    message = f"Invalid request: {', '.join(fields)}" if fields else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, BadInputException.code),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(ServerErrorException().message, ServerErrorException.code),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
