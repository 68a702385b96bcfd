# hostel_ops/models/base.py
"""
Base model configuration for SQLAlchemy ORM.

Provides the declarative base and the abstract model every table extends,
which carries a string UUID primary key.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current UTC time used for column defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Root SQLAlchemy base class."""
    pass


class BaseModel(Base):
    """
    Abstract base model with common fields and methods.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
        comment="Primary key (UUID)",
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"
