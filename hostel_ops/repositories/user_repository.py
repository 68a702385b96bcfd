"""
User Repository - account lookup for login and staff listings.
"""
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hostel_ops.models.enums import UserRole
from hostel_ops.models.user import User
from hostel_ops.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address (case-insensitive).

        Args:
            email: Email address to search

        Returns:
            User entity or None
        """
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        return self.db.scalars(stmt).first()

    def exists_by_email(self, email: str) -> bool:
        stmt = select(User.id).where(func.lower(User.email) == email.strip().lower())
        return self.db.scalars(stmt).first() is not None

    def find_by_role(self, role: UserRole) -> List[User]:
        """Return every account holding ``role``, ordered by name."""
        stmt = select(User).where(User.role == role).order_by(User.full_name)
        return list(self.db.scalars(stmt).all())

    def find_all_ordered(self) -> List[User]:
        stmt = select(User).order_by(User.created_at)
        return list(self.db.scalars(stmt).all())
