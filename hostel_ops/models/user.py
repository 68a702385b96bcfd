"""
User model configuration.
"""

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from hostel_ops.models.base import BaseModel
from hostel_ops.models.enums import UserRole
from hostel_ops.models.mixins import CreatedAtMixin

__all__ = ["User"]


class User(BaseModel, CreatedAtMixin):
    """
    Core User entity.

    Holds login credentials and the single role that drives every
    authorization decision. The role is fixed at creation time.
    """

    __tablename__ = "users"
    __table_args__ = (
        {"comment": "Accounts for students, wardens, staff and admins"},
    )

    full_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Full name of the user",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Unique email address (normalized to lowercase)",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role", native_enum=False, length=20),
        nullable=False,
        index=True,
        comment="Role used for endpoint authorization",
    )
