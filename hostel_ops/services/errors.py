# hostel_ops/services/errors.py
"""
Service-layer exceptions.

These exceptions are raised by service methods and rendered by the API
exception handlers with the HTTP status each one carries.
"""
from __future__ import annotations

from typing import Any, Optional

from hostel_ops.core.exceptions import BaseAppException, ErrorCode


class ServiceError(BaseAppException):
    """Base exception for all service-layer errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message, error_code, details, status_code)


class NotFoundError(ServiceError):
    """Raised when a referenced resource does not exist."""

    def __init__(
        self,
        resource_type: str,
        identifier: Any,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource_type} not found"
        super().__init__(
            message,
            ErrorCode.RESOURCE_NOT_FOUND,
            {"resource_type": resource_type, "identifier": str(identifier), **(details or {})},
            404,
        )
        self.resource_type = resource_type
        self.identifier = identifier


class AlreadyExistsError(ServiceError):
    """Raised when a write would violate a uniqueness rule."""

    def __init__(
        self,
        resource_type: str,
        field: Optional[str] = None,
        value: Any = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if field:
            message = f"{resource_type} with {field} '{value}' already exists"
        else:
            message = f"{resource_type} already exists"
        payload = {"resource_type": resource_type, **(details or {})}
        if field:
            payload["field"] = field
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, payload, 409)
        self.resource_type = resource_type
        self.field = field


class InvalidArgumentError(ServiceError):
    """Raised when an argument is well-formed but refers to the wrong kind of thing."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_ARGUMENT,
            {"field": field} if field else None,
            400,
        )
        self.field = field


class InvalidStateError(ServiceError):
    """Raised when an action is not allowed in the entity's current state."""

    def __init__(
        self,
        message: str,
        current_state: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        payload = dict(details or {})
        if current_state is not None:
            payload["current_state"] = current_state
        super().__init__(message, ErrorCode.INVALID_STATE, payload, 409)
        self.current_state = current_state


class AuthenticationError(ServiceError):
    """Raised when credentials or tokens are not acceptable."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, None, 401)


class AuthorizationError(ServiceError):
    """Raised when an authenticated caller may not perform an action."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, details, 403)


__all__ = [
    "ServiceError",
    "NotFoundError",
    "AlreadyExistsError",
    "InvalidArgumentError",
    "InvalidStateError",
    "AuthenticationError",
    "AuthorizationError",
]
