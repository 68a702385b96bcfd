"""
Account registration, login and token resolution.
"""

from typing import Optional, Tuple

from sqlalchemy.orm import Session

from hostel_ops.config import settings
from hostel_ops.core.security import (
    TokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from hostel_ops.models.enums import UserRole
from hostel_ops.models.user import User
from hostel_ops.repositories.user_repository import UserRepository
from hostel_ops.schemas.user import RegisterRequest, UserCreateRequest
from hostel_ops.services.base_service import BaseService
from hostel_ops.services.errors import AlreadyExistsError, AuthenticationError, NotFoundError
from hostel_ops.services.permissions import Principal


class AuthService(BaseService):
    """
    Handles account creation and credential checks.

    Self-registration always yields a STUDENT; other roles are created by
    an administrator through ``create_user``.
    """

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.users = UserRepository(db_session)

    def register_student(self, request: RegisterRequest) -> User:
        """Create a STUDENT account; any role in the request is ignored."""
        return self._create_account(request.full_name, request.email, request.password, UserRole.STUDENT)

    def create_user(self, request: UserCreateRequest) -> User:
        return self._create_account(request.full_name, request.email, request.password, request.role)

    def _create_account(self, full_name: str, email: str, password: str, role: UserRole) -> User:
        email = email.strip().lower()
        if self.users.exists_by_email(email):
            raise AlreadyExistsError("User", field="email", value=email)

        user = User(
            full_name=full_name,
            email=email,
            password_hash=hash_password(password),
            role=role,
        )
        with self.transaction():
            self.users.create(user)

        self._logger.info("Account created", user_id=user.id, role=role.value)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Check credentials.

        Raises:
            AuthenticationError: On unknown e-mail or wrong password; the two
                cases are indistinguishable to the caller
        """
        user = self.users.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            self._logger.info("Login failed", reason="bad_credentials")
            raise AuthenticationError("Incorrect email or password")
        return user

    def login(self, email: str, password: str) -> Tuple[str, int, User]:
        """Authenticate and issue an access token: ``(token, expires_in_seconds, user)``."""
        user = self.authenticate(email, password)
        token = create_access_token({"sub": user.id, "email": user.email, "role": user.role.value})
        self._logger.info("Login succeeded", user_id=user.id)
        return token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60, user

    def resolve_token(self, token: Optional[str]) -> User:
        """
        Map a bearer token to its account.

        Raises:
            AuthenticationError: If the token is missing, invalid, expired or
                names an account that no longer exists
        """
        if not token:
            raise AuthenticationError("Not authenticated")
        try:
            payload = decode_access_token(token)
        except TokenError as e:
            raise AuthenticationError(str(e)) from e

        user_id = payload.get("sub")
        user = self.users.get_by_id(user_id) if user_id else None
        if user is None:
            raise AuthenticationError("User for token no longer exists")
        return user

    def get_profile(self, principal: Principal) -> User:
        user = self.users.get_by_id(principal.user_id)
        if user is None:
            raise NotFoundError("User", principal.user_id)
        return user
