"""
Authentication schemas.

The token response keeps OAuth2's snake_case field names so standard
clients (and the interactive docs) can read it.
"""

from pydantic import BaseModel

from hostel_ops.schemas.user import UserResponse

__all__ = ["TokenResponse"]


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
