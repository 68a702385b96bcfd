"""
Account schemas: registration, admin creation and profile output.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from hostel_ops.config import settings
from hostel_ops.models.enums import UserRole
from hostel_ops.models.user import User
from hostel_ops.schemas.common import BaseCreateSchema, BaseResponseSchema

__all__ = ["RegisterRequest", "UserCreateRequest", "UserResponse"]


class RegisterRequest(BaseCreateSchema):
    """
    Self-service registration body.

    ``role`` is accepted for compatibility with the admin form but ignored:
    self-registered accounts are always students.
    """

    # Passwords are compared verbatim at login
    model_config = ConfigDict(str_strip_whitespace=False)

    full_name: str = Field(..., max_length=255)
    email: EmailStr
    password: str = Field(..., max_length=128)
    role: Optional[UserRole] = None

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Full name must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
            )
        return v


class UserCreateRequest(RegisterRequest):
    """Admin-created account with an explicit role."""

    role: UserRole


class UserResponse(BaseResponseSchema):
    id: str
    full_name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        return cls.model_validate(user)
