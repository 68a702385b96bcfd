"""
Complaint model.

One row per complaint filed by a student. Status changes are applied by
the lifecycle services only.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_ops.models.base import BaseModel
from hostel_ops.models.enums import ComplaintStatus, ComplaintType
from hostel_ops.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from hostel_ops.models.ticket import Ticket
    from hostel_ops.models.user import User

__all__ = ["Complaint"]


class Complaint(BaseModel, TimestampMixin):
    """
    Student-filed maintenance request.

    Attributes:
        student_id: Filing student, immutable
        assigned_to_id: Cleaner or electrician currently responsible
        complaint_type: Category, also the staff role it is routed to
        location: Free-text location (e.g. "Block A, Room 12")
        description: Free-text description of the problem
        status: Current lifecycle status
    """

    __tablename__ = "complaints"
    __table_args__ = (
        Index("ix_complaints_assigned_to_status", "assigned_to_id", "status"),
        Index("ix_complaints_type_status", "complaint_type", "status"),
        {"comment": "Student complaints and their lifecycle status"},
    )

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    assigned_to_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    complaint_type: Mapped[ComplaintType] = mapped_column(
        Enum(ComplaintType, name="complaint_type", native_enum=False, length=20),
        nullable=False,
    )
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[ComplaintStatus] = mapped_column(
        Enum(ComplaintStatus, name="complaint_status", native_enum=False, length=20),
        nullable=False,
        default=ComplaintStatus.SUBMITTED,
        index=True,
    )

    # Repository queries eager-load these with joinedload()
    student: Mapped["User"] = relationship(
        "User",
        foreign_keys=[student_id],
    )
    assigned_to: Mapped[Optional["User"]] = relationship(
        "User",
        foreign_keys=[assigned_to_id],
    )
    ticket: Mapped[Optional["Ticket"]] = relationship(
        "Ticket",
        back_populates="complaint",
        uselist=False,
    )
