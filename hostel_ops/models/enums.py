"""
Enumerations shared by the ORM models and the API schemas.
"""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration."""

    STUDENT = "STUDENT"
    WARDEN = "WARDEN"
    CLEANER = "CLEANER"
    ELECTRICIAN = "ELECTRICIAN"
    ADMIN = "ADMIN"


class ComplaintType(str, Enum):
    """
    Complaint category.

    The value doubles as the staff role the complaint is routed to.
    """

    CLEANER = "CLEANER"
    ELECTRICIAN = "ELECTRICIAN"


class ComplaintStatus(str, Enum):
    """Complaint lifecycle status."""

    SUBMITTED = "SUBMITTED"
    ASSIGNED = "ASSIGNED"
    IN_PROGRESS = "IN_PROGRESS"
    TICKET_GENERATED = "TICKET_GENERATED"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


class TicketStatus(str, Enum):
    """Ticket lifecycle status."""

    OPEN = "OPEN"
    RESOLVED = "RESOLVED"
