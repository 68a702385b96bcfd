"""
Security and Authentication Module

Password hashing and JWT access token management.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

from hostel_ops.config import settings
from hostel_ops.core.constants import TOKEN_TYPE_ACCESS
from hostel_ops.core.logging import get_logger

logger = get_logger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class TokenError(Exception):
    """Raised when an access token cannot be decoded or is not acceptable"""


class PasswordManager:
    """Password hashing and verification"""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Returns:
            True if password matches, False otherwise (including unknown
            hash formats)
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError as e:
            logger.warning("Password verification failed", error=str(e))
            return False


class TokenManager:
    """JWT token management utilities"""

    @staticmethod
    def create_access_token(
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a signed access token.

        Args:
            data: Claims to encode (``sub``, ``email``, ``role``)
            expires_delta: Custom lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

        Returns:
            Encoded JWT
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

        to_encode = data.copy()
        to_encode.update({
            "exp": expire,
            "iat": now,
            "type": TOKEN_TYPE_ACCESS,
            "jti": secrets.token_urlsafe(16),
        })
        return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    @staticmethod
    def decode_access_token(token: str) -> Dict[str, Any]:
        """
        Verify and decode an access token.

        Raises:
            TokenError: If the token is expired, malformed or not an access token
        """
        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET_KEY,
                algorithms=[settings.JWT_ALGORITHM],
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenError("Token has expired") from e
        except jwt.PyJWTError as e:
            logger.warning("Token verification failed", error=str(e))
            raise TokenError("Invalid token") from e

        if payload.get("type") != TOKEN_TYPE_ACCESS:
            raise TokenError("Invalid token type")
        return payload


# Module-level shortcuts
def hash_password(password: str) -> str:
    """Hash password using the global password manager"""
    return PasswordManager.hash_password(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password using the global password manager"""
    return PasswordManager.verify_password(plain_password, hashed_password)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create access token using the global token manager"""
    return TokenManager.create_access_token(data, expires_delta)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Decode access token using the global token manager"""
    return TokenManager.decode_access_token(token)
