"""
Ticket repository.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import TicketStatus
from hostel_ops.models.ticket import Ticket
from hostel_ops.repositories.base_repository import BaseRepository


class TicketRepository(BaseRepository[Ticket]):
    """Data access for tickets."""

    def __init__(self, session: Session):
        super().__init__(Ticket, session)

    def _with_details(self):
        return select(Ticket).options(
            joinedload(Ticket.complaint).joinedload(Complaint.student),
            joinedload(Ticket.warden),
            joinedload(Ticket.assigned_to),
        )

    def get_with_details(self, ticket_id: str) -> Optional[Ticket]:
        """Ticket by id with complaint, complaint student, warden and assignee loaded."""
        stmt = self._with_details().where(Ticket.id == ticket_id)
        return self.db.scalars(stmt).unique().first()

    def find_by_complaint_id(self, complaint_id: str) -> Optional[Ticket]:
        stmt = select(Ticket).where(Ticket.complaint_id == complaint_id)
        return self.db.scalars(stmt).first()

    def exists_by_ticket_number(self, ticket_number: str) -> bool:
        stmt = select(Ticket.id).where(Ticket.ticket_number == ticket_number)
        return self.db.scalars(stmt).first() is not None

    def find_by_assignee_excluding_status(
        self,
        assignee_id: str,
        status: TicketStatus,
    ) -> List[Ticket]:
        """Tickets assigned to ``assignee_id`` whose status is not ``status``."""
        stmt = (
            self._with_details()
            .where(Ticket.assigned_to_id == assignee_id, Ticket.status != status)
            .order_by(Ticket.created_at)
        )
        return list(self.db.scalars(stmt).unique().all())

    def count_by_status(self, status: TicketStatus) -> int:
        stmt = select(func.count()).select_from(Ticket).where(Ticket.status == status)
        return self.db.scalar(stmt) or 0
