"""
Reusable column mixins.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column

from hostel_ops.models.base import utcnow


class CreatedAtMixin:
    """Creation timestamp, set once on insert."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
        comment="Record creation timestamp (UTC)",
    )


class TimestampMixin(CreatedAtMixin):
    """
    Mixin for automatic timestamp tracking.

    Provides created_at and updated_at fields; updated_at is refreshed on
    every flush that changes the row.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        comment="Record last update timestamp (UTC)",
    )
