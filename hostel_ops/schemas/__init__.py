"""
Request and response schemas.
"""

from hostel_ops.schemas.auth import TokenResponse
from hostel_ops.schemas.complaint import (
    AdminComplaintResponse,
    CleaningTaskResponse,
    ComplaintCreateRequest,
    ComplaintResponse,
)
from hostel_ops.schemas.dashboard import DashboardStats
from hostel_ops.schemas.ticket import TicketCreateRequest, TicketResolveRequest, TicketResponse
from hostel_ops.schemas.user import RegisterRequest, UserCreateRequest, UserResponse

__all__ = [
    "TokenResponse",
    "RegisterRequest",
    "UserCreateRequest",
    "UserResponse",
    "ComplaintCreateRequest",
    "ComplaintResponse",
    "CleaningTaskResponse",
    "AdminComplaintResponse",
    "TicketCreateRequest",
    "TicketResolveRequest",
    "TicketResponse",
    "DashboardStats",
]
