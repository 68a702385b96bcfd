"""
Repository layer: explicit SQLAlchemy queries per aggregate.
"""

from hostel_ops.repositories.base_repository import BaseRepository
from hostel_ops.repositories.complaint_repository import ComplaintRepository
from hostel_ops.repositories.ticket_repository import TicketRepository
from hostel_ops.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ComplaintRepository",
    "TicketRepository",
]
