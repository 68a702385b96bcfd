"""
Dashboard aggregation.
"""

from sqlalchemy.orm import Session

from hostel_ops.models.enums import ComplaintStatus, TicketStatus
from hostel_ops.repositories.complaint_repository import ComplaintRepository
from hostel_ops.repositories.ticket_repository import TicketRepository
from hostel_ops.schemas.dashboard import DashboardStats
from hostel_ops.services.base_service import BaseService


class DashboardService(BaseService):
    """Read-only complaint and ticket counts, computed on every call."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.complaints = ComplaintRepository(db_session)
        self.tickets = TicketRepository(db_session)

    def get_stats(self) -> DashboardStats:
        return DashboardStats(
            total_complaints=self.complaints.count(),
            pending_complaints=self.complaints.count_by_status(ComplaintStatus.SUBMITTED),
            completed_complaints=self.complaints.count_by_status(ComplaintStatus.COMPLETED),
            open_tickets=self.tickets.count_by_status(TicketStatus.OPEN),
            resolved_tickets=self.tickets.count_by_status(TicketStatus.RESOLVED),
        )
