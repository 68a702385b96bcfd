# hostel_ops/services/permissions.py
"""
Caller identity and authorization checks for the service layer.

Routes authenticate the caller and hand services a ``Principal``; services
never look up the current user on their own.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from hostel_ops.models.enums import UserRole
from hostel_ops.models.user import User

from .errors import AuthorizationError


@dataclass(frozen=True)
class Principal:
    """
    Represents an authenticated user in the service layer.

    Attributes:
        user_id: Account id (the token ``sub`` claim)
        email: Account e-mail
        role: Account role
    """
    user_id: str
    email: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(user_id=user.id, email=user.email, role=user.role)

    def has_any_role(self, roles: Iterable[UserRole]) -> bool:
        return self.role in set(roles)


def require_role(
    principal: Principal,
    allowed_roles: Iterable[UserRole],
    *,
    error_message: Optional[str] = None,
) -> None:
    """
    Assert that principal has one of the allowed roles.

    Raises:
        AuthorizationError: If principal lacks a required role
    """
    allowed = list(allowed_roles)
    if not principal.has_any_role(allowed):
        roles_str = ", ".join(r.value for r in allowed)
        raise AuthorizationError(
            error_message or f"Role '{principal.role.value}' may not perform this action",
            details={"required_roles": roles_str},
        )


def require_assignee(principal: Principal, assigned_to_id: Optional[str], resource: str) -> None:
    """
    Assert that the caller is the user ``resource`` is assigned to.

    Raises:
        AuthorizationError: If the caller is not the assignee
    """
    if assigned_to_id is None or assigned_to_id != principal.user_id:
        raise AuthorizationError(
            f"This {resource} is not assigned to you",
            details={"resource": resource},
        )


__all__ = ["Principal", "require_role", "require_assignee"]
