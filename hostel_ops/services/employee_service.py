"""
Cleaner and electrician operations.

Both roles only ever act on work assigned to them: the caller must be the
complaint's (or ticket's) assignee.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostel_ops.core.notifications import NotificationDispatcher
from hostel_ops.models.base import utcnow
from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus, TicketStatus
from hostel_ops.models.ticket import Ticket
from hostel_ops.repositories.complaint_repository import ComplaintRepository
from hostel_ops.repositories.ticket_repository import TicketRepository
from hostel_ops.services.base_service import BaseService
from hostel_ops.services.complaint_lifecycle import ensure_transition
from hostel_ops.services.errors import AuthorizationError, InvalidStateError, NotFoundError
from hostel_ops.services.notification_service import NotificationComposer
from hostel_ops.services.permissions import Principal, require_assignee


class EmployeeService(BaseService):
    """Work queues of cleaners and electricians."""

    def __init__(
        self,
        db_session: Session,
        notifications: Optional[NotificationDispatcher] = None,
        composer: Optional[NotificationComposer] = None,
    ):
        super().__init__(db_session, notifications)
        self.complaints = ComplaintRepository(db_session)
        self.tickets = TicketRepository(db_session)
        self.composer = composer or NotificationComposer()

    # -------------------------------------------------------------------------
    # Cleaners
    # -------------------------------------------------------------------------

    def cleaning_tasks(self, principal: Principal, cleaner_id: Optional[str] = None) -> List[Complaint]:
        """
        IN_PROGRESS complaints assigned to the calling cleaner.

        ``cleaner_id`` may be passed explicitly but must name the caller.
        """
        if cleaner_id is not None and cleaner_id != principal.user_id:
            raise AuthorizationError(
                "Cleaners can only list their own tasks",
                details={"cleaner_id": cleaner_id},
            )
        return self.complaints.find_by_assignee_and_status(principal.user_id, ComplaintStatus.IN_PROGRESS)

    def complete_cleaning_task(self, principal: Principal, complaint_id: str) -> Complaint:
        """
        Mark an assigned complaint COMPLETED and tell the student.

        Raises:
            NotFoundError: Unknown complaint
            AuthorizationError: Caller is not the assignee
            InvalidStateError: Complaint cannot move to COMPLETED
        """
        complaint = self.complaints.get_with_people(complaint_id)
        if complaint is None:
            raise NotFoundError("Complaint", complaint_id)
        require_assignee(principal, complaint.assigned_to_id, "complaint")
        ensure_transition(complaint, ComplaintStatus.COMPLETED)

        previous = complaint.status
        complaint.status = ComplaintStatus.COMPLETED
        with self.transaction():
            self.complaints.save(complaint)

        self._logger.info(
            "Complaint status changed",
            complaint_id=complaint.id,
            from_status=previous.value,
            to_status=complaint.status.value,
            actor_id=principal.user_id,
        )
        self._notify(self.composer.cleaning_completed(complaint))
        return complaint

    # -------------------------------------------------------------------------
    # Electricians
    # -------------------------------------------------------------------------

    def assigned_tickets(self, principal: Principal) -> List[Ticket]:
        return self.tickets.find_by_assignee_excluding_status(principal.user_id, TicketStatus.RESOLVED)

    def resolve_ticket(self, principal: Principal, ticket_id: str, resolution_notes: Optional[str]) -> Ticket:
        """
        Resolve an OPEN ticket and complete its complaint in one transaction.

        Raises:
            NotFoundError: Unknown ticket
            AuthorizationError: Caller is not the ticket's assignee
            InvalidStateError: Ticket is not OPEN, or the complaint cannot
                move to COMPLETED
        """
        ticket = self.tickets.get_with_details(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket", ticket_id)
        require_assignee(principal, ticket.assigned_to_id, "ticket")
        if ticket.status != TicketStatus.OPEN:
            raise InvalidStateError(
                f"Ticket {ticket.ticket_number} is already {ticket.status.value}",
                current_state=ticket.status.value,
            )

        complaint = ticket.complaint
        ensure_transition(complaint, ComplaintStatus.COMPLETED)

        ticket.status = TicketStatus.RESOLVED
        ticket.resolution_notes = resolution_notes
        ticket.resolved_at = utcnow()
        complaint.status = ComplaintStatus.COMPLETED
        with self.transaction():
            self.tickets.save(ticket)
            self.complaints.save(complaint)

        self._logger.info(
            "Ticket resolved",
            ticket_id=ticket.id,
            ticket_number=ticket.ticket_number,
            complaint_id=complaint.id,
            to_status=complaint.status.value,
            actor_id=principal.user_id,
        )
        self._notify(self.composer.ticket_resolved(ticket))
        return ticket
