"""
Complaint repository.

Every query states which related rows it loads, so listing endpoints never
fall back to per-row lazy loads.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus
from hostel_ops.models.ticket import Ticket
from hostel_ops.repositories.base_repository import BaseRepository


class ComplaintRepository(BaseRepository[Complaint]):
    """Data access for complaints."""

    def __init__(self, session: Session):
        super().__init__(Complaint, session)

    def _with_people(self):
        return select(Complaint).options(
            joinedload(Complaint.student),
            joinedload(Complaint.assigned_to),
        )

    def get_with_people(self, complaint_id: str) -> Optional[Complaint]:
        """Complaint by id with student and assignee loaded."""
        stmt = self._with_people().where(Complaint.id == complaint_id)
        return self.db.scalars(stmt).unique().first()

    def find_all_with_people(self) -> List[Complaint]:
        """All complaints, newest first, with student and assignee loaded."""
        stmt = self._with_people().order_by(Complaint.created_at.desc())
        return list(self.db.scalars(stmt).unique().all())

    def find_by_student_id(self, student_id: str) -> List[Complaint]:
        stmt = (
            self._with_people()
            .where(Complaint.student_id == student_id)
            .order_by(Complaint.created_at.desc())
        )
        return list(self.db.scalars(stmt).unique().all())

    def find_by_assignee_and_status(
        self,
        assignee_id: str,
        status: ComplaintStatus,
    ) -> List[Complaint]:
        stmt = (
            select(Complaint)
            .where(Complaint.assigned_to_id == assignee_id, Complaint.status == status)
            .order_by(Complaint.created_at)
        )
        return list(self.db.scalars(stmt).all())

    def find_all_with_ticket_data(self) -> List[Complaint]:
        """
        Full complaint history for the admin view.

        Loads student, assignee, ticket and the ticket's assignee in a
        single round trip.
        """
        stmt = (
            self._with_people()
            .options(joinedload(Complaint.ticket).joinedload(Ticket.assigned_to))
            .order_by(Complaint.created_at.desc())
        )
        return list(self.db.scalars(stmt).unique().all())

    def count_by_status(self, status: ComplaintStatus) -> int:
        stmt = select(func.count()).select_from(Complaint).where(Complaint.status == status)
        return self.db.scalar(stmt) or 0
