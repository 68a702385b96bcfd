"""
Ticket model.

A warden-issued work order escalating exactly one complaint to an
electrician. The unique constraint on ``complaint_id`` keeps the
complaint/ticket relationship one-to-one at the storage layer.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_ops.models.base import BaseModel
from hostel_ops.models.enums import TicketStatus
from hostel_ops.models.mixins import CreatedAtMixin

if TYPE_CHECKING:
    from hostel_ops.models.complaint import Complaint
    from hostel_ops.models.user import User

__all__ = ["Ticket"]


class Ticket(BaseModel, CreatedAtMixin):
    """
    Work order for an escalated complaint.

    Attributes:
        ticket_number: Human-readable unique reference, immutable once set
        complaint_id: Escalated complaint (one-to-one)
        warden_id: Warden who generated the ticket
        assigned_to_id: Electrician responsible for the work
        status: OPEN until the assignee resolves it
        resolution_notes: Set only on resolution
        resolved_at: Set only on resolution
    """

    __tablename__ = "tickets"
    __table_args__ = (
        Index("ix_tickets_assigned_to_status", "assigned_to_id", "status"),
        {"comment": "Electrician work orders generated from complaints"},
    )

    ticket_number: Mapped[str] = mapped_column(
        String(32),
        unique=True,
        nullable=False,
        index=True,
        comment="Unique human-readable ticket reference",
    )
    complaint_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("complaints.id", ondelete="RESTRICT"),
        unique=True,
        nullable=False,
    )
    warden_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    )
    assigned_to_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    )
    status: Mapped[TicketStatus] = mapped_column(
        Enum(TicketStatus, name="ticket_status", native_enum=False, length=20),
        nullable=False,
        default=TicketStatus.OPEN,
        index=True,
    )
    resolution_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    resolved_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    complaint: Mapped["Complaint"] = relationship(
        "Complaint",
        back_populates="ticket",
    )
    warden: Mapped["User"] = relationship("User", foreign_keys=[warden_id])
    assigned_to: Mapped["User"] = relationship("User", foreign_keys=[assigned_to_id])
