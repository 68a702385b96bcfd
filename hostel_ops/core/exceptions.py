"""
Custom Exceptions for the Hostel Facility Desk

Defines the base application exception, the error code taxonomy and the
FastAPI exception handlers that render every error with one JSON shape:

    {"error": {"code": ..., "message": ..., "details": ..., "type": ...}}
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hostel_ops.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    HTTP_ERROR = "HTTP_ERROR"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Carries the HTTP status it maps to so handlers never need a lookup table.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__,
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


def _error_body(code: str, message: str, error_type: str, details: Any = None) -> Dict[str, Any]:
    return {
        "error": {
            "message": message,
            "code": code,
            "details": details or {},
            "type": error_type,
        }
    }


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    logger.warning(
        "Request failed",
        path=request.url.path,
        method=request.method,
        error_code=exc.error_code.value,
        error_message=exc.message,
        status_code=exc.status_code,
    )
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(ErrorCode.HTTP_ERROR.value, str(exc.detail), "HTTPException"),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(ErrorCode.INTERNAL_ERROR.value, "Internal server error", "InternalError"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to the application."""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "register_exception_handlers",
]
