"""
Ticket schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hostel_ops.models.enums import ComplaintType, TicketStatus
from hostel_ops.models.ticket import Ticket
from hostel_ops.schemas.common import BaseCreateSchema, BaseResponseSchema

__all__ = ["TicketCreateRequest", "TicketResolveRequest", "TicketResponse"]


class TicketCreateRequest(BaseCreateSchema):
    """Body of ``POST /warden/tickets``."""

    complaint_id: str = Field(..., min_length=1)
    electrician_id: str = Field(..., min_length=1)


class TicketResolveRequest(BaseCreateSchema):
    resolution_notes: Optional[str] = Field(None, max_length=4000)


class TicketResponse(BaseResponseSchema):
    id: str
    ticket_number: str
    complaint_id: str
    complaint_description: Optional[str] = None
    complaint_type: Optional[ComplaintType] = None
    complaint_location: Optional[str] = None
    assigned_to_id: str
    assigned_to_name: Optional[str] = None
    warden_id: str
    warden_name: Optional[str] = None
    status: TicketStatus
    resolution_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, ticket: Ticket) -> "TicketResponse":
        complaint = ticket.complaint
        return cls(
            id=ticket.id,
            ticket_number=ticket.ticket_number,
            complaint_id=ticket.complaint_id,
            complaint_description=complaint.description if complaint else None,
            complaint_type=complaint.complaint_type if complaint else None,
            complaint_location=complaint.location if complaint else None,
            assigned_to_id=ticket.assigned_to_id,
            assigned_to_name=ticket.assigned_to.full_name if ticket.assigned_to else None,
            warden_id=ticket.warden_id,
            warden_name=ticket.warden.full_name if ticket.warden else None,
            status=ticket.status,
            resolution_notes=ticket.resolution_notes,
            created_at=ticket.created_at,
            resolved_at=ticket.resolved_at,
        )
