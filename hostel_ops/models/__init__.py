# hostel_ops/models/__init__.py
from hostel_ops.models.base import Base, BaseModel
from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus, ComplaintType, TicketStatus, UserRole
from hostel_ops.models.ticket import Ticket
from hostel_ops.models.user import User

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "Complaint",
    "Ticket",
    "UserRole",
    "ComplaintType",
    "ComplaintStatus",
    "TicketStatus",
]
