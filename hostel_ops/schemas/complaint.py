"""
Complaint schemas.

Response builders read relationships that the repositories load eagerly;
pass them complaints fetched through ``ComplaintRepository``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus, ComplaintType
from hostel_ops.schemas.common import BaseCreateSchema, BaseResponseSchema

__all__ = [
    "ComplaintCreateRequest",
    "ComplaintResponse",
    "CleaningTaskResponse",
    "AdminComplaintResponse",
]


class ComplaintCreateRequest(BaseCreateSchema):
    """Body of ``POST /complaints``."""

    complaint_type: ComplaintType
    location: str = Field(..., max_length=255)
    description: str = Field(..., max_length=4000)

    @field_validator("location", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Value must not be blank")
        return v


class ComplaintResponse(BaseResponseSchema):
    id: str
    student_id: str
    student_name: Optional[str] = None
    assigned_to_id: Optional[str] = None
    assigned_to_name: Optional[str] = None
    complaint_type: ComplaintType
    location: str
    description: str
    status: ComplaintStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, complaint: Complaint) -> "ComplaintResponse":
        student = complaint.student
        assignee = complaint.assigned_to
        return cls(
            id=complaint.id,
            student_id=complaint.student_id,
            student_name=student.full_name if student else None,
            assigned_to_id=complaint.assigned_to_id,
            assigned_to_name=assignee.full_name if assignee else None,
            complaint_type=complaint.complaint_type,
            location=complaint.location,
            description=complaint.description,
            status=complaint.status,
            created_at=complaint.created_at,
            updated_at=complaint.updated_at,
        )


class CleaningTaskResponse(BaseResponseSchema):
    """A cleaner's view of an assigned complaint."""

    id: str
    complaint_type: ComplaintType
    description: str
    location: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, complaint: Complaint) -> "CleaningTaskResponse":
        return cls.model_validate(complaint)


class AdminComplaintResponse(ComplaintResponse):
    """Complaint joined with its ticket, if one was generated."""

    ticket_id: Optional[str] = None
    ticket_number: Optional[str] = None
    ticket_assigned_to: Optional[str] = None
    resolved_at: Optional[datetime] = None
    resolution_notes: Optional[str] = None

    @classmethod
    def from_model(cls, complaint: Complaint) -> "AdminComplaintResponse":
        base = ComplaintResponse.from_model(complaint).model_dump()
        ticket = complaint.ticket
        if ticket is None:
            return cls(**base)
        return cls(
            **base,
            ticket_id=ticket.id,
            ticket_number=ticket.ticket_number,
            ticket_assigned_to=ticket.assigned_to.full_name if ticket.assigned_to else None,
            resolved_at=ticket.resolved_at,
            resolution_notes=ticket.resolution_notes,
        )
