"""
Warden operations: triage of submitted complaints.

Cleaning complaints are approved and handed straight to a cleaner;
electrical complaints are escalated to an electrician through a ticket.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostel_ops.core.constants import TICKET_NUMBER_MAX_ATTEMPTS
from hostel_ops.core.notifications import NotificationDispatcher
from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus, ComplaintType, TicketStatus, UserRole
from hostel_ops.models.ticket import Ticket
from hostel_ops.models.user import User
from hostel_ops.repositories.complaint_repository import ComplaintRepository
from hostel_ops.repositories.ticket_repository import TicketRepository
from hostel_ops.repositories.user_repository import UserRepository
from hostel_ops.schemas.ticket import TicketCreateRequest
from hostel_ops.services.base_service import BaseService
from hostel_ops.services.complaint_lifecycle import ensure_transition, generate_ticket_number
from hostel_ops.services.errors import (
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from hostel_ops.services.notification_service import NotificationComposer
from hostel_ops.services.permissions import Principal


class WardenService(BaseService):
    """Complaint triage performed by wardens."""

    def __init__(
        self,
        db_session: Session,
        notifications: Optional[NotificationDispatcher] = None,
        composer: Optional[NotificationComposer] = None,
    ):
        super().__init__(db_session, notifications)
        self.complaints = ComplaintRepository(db_session)
        self.tickets = TicketRepository(db_session)
        self.users = UserRepository(db_session)
        self.composer = composer or NotificationComposer()

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    def list_complaints(self) -> List[Complaint]:
        return self.complaints.find_all_with_people()

    def list_cleaners(self) -> List[User]:
        return self.users.find_by_role(UserRole.CLEANER)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def approve_cleaning(self, principal: Principal, complaint_id: str, cleaner_id: str) -> Complaint:
        """
        Assign a CLEANER complaint to a cleaner and mark it IN_PROGRESS.

        Raises:
            NotFoundError: Unknown complaint or cleaner
            InvalidStateError: Not a cleaning complaint, or not in a status
                that can move to IN_PROGRESS
            InvalidArgumentError: ``cleaner_id`` does not hold the CLEANER role
        """
        complaint = self._get_complaint(complaint_id)
        if complaint.complaint_type != ComplaintType.CLEANER:
            raise InvalidStateError(
                "Only cleaning complaints can be approved for a cleaner",
                current_state=complaint.status.value,
                details={"complaint_type": complaint.complaint_type.value},
            )

        cleaner = self._get_user_with_role(cleaner_id, UserRole.CLEANER, "Cleaner", "cleanerId")
        ensure_transition(complaint, ComplaintStatus.IN_PROGRESS)

        previous = complaint.status
        complaint.status = ComplaintStatus.IN_PROGRESS
        complaint.assigned_to = cleaner
        with self.transaction():
            self.complaints.save(complaint)

        self._logger.info(
            "Complaint status changed",
            complaint_id=complaint.id,
            from_status=previous.value,
            to_status=complaint.status.value,
            assigned_to_id=cleaner.id,
            actor_id=principal.user_id,
        )
        self._notify(self.composer.cleaning_approved(complaint))
        return complaint

    def create_ticket(self, principal: Principal, request: TicketCreateRequest) -> Ticket:
        """
        Escalate a complaint to an electrician.

        The complaint update and the ticket insert commit together or not
        at all.

        Raises:
            NotFoundError: Unknown complaint, electrician or warden
            InvalidArgumentError: ``electrician_id`` is not an ELECTRICIAN
            InvalidStateError: Complaint already has a ticket or cannot move
                to IN_PROGRESS
        """
        complaint = self._get_complaint(request.complaint_id)
        electrician = self._get_user_with_role(
            request.electrician_id, UserRole.ELECTRICIAN, "Electrician", "electricianId"
        )
        warden = self.users.get_by_id(principal.user_id)
        if warden is None:
            raise NotFoundError("Warden", principal.user_id)

        if self.tickets.find_by_complaint_id(complaint.id) is not None:
            raise InvalidStateError(
                "A ticket already exists for this complaint",
                current_state=complaint.status.value,
            )
        ensure_transition(complaint, ComplaintStatus.IN_PROGRESS)

        previous = complaint.status
        ticket = Ticket(
            ticket_number=self._next_ticket_number(),
            complaint_id=complaint.id,
            warden_id=warden.id,
            assigned_to_id=electrician.id,
            status=TicketStatus.OPEN,
        )
        complaint.status = ComplaintStatus.IN_PROGRESS
        with self.transaction():
            self.complaints.save(complaint)
            self.tickets.create(ticket)

        self._logger.info(
            "Ticket created",
            ticket_id=ticket.id,
            ticket_number=ticket.ticket_number,
            complaint_id=complaint.id,
            from_status=previous.value,
            to_status=complaint.status.value,
            assigned_to_id=electrician.id,
            actor_id=principal.user_id,
        )
        self._notify(self.composer.ticket_generated(ticket, complaint, electrician))
        return self.tickets.get_with_details(ticket.id) or ticket

    def reject_complaint(self, principal: Principal, complaint_id: str) -> Complaint:
        """
        Close a complaint as REJECTED.

        Raises:
            NotFoundError: Unknown complaint
            InvalidStateError: Complaint is already COMPLETED or REJECTED, or
                still has an OPEN ticket
        """
        complaint = self._get_complaint(complaint_id)
        ticket = self.tickets.find_by_complaint_id(complaint.id)
        if ticket is not None and ticket.status == TicketStatus.OPEN:
            raise InvalidStateError(
                "Complaint has an open ticket and cannot be rejected",
                current_state=complaint.status.value,
                details={"ticket_number": ticket.ticket_number},
            )
        ensure_transition(complaint, ComplaintStatus.REJECTED)

        previous = complaint.status
        complaint.status = ComplaintStatus.REJECTED
        with self.transaction():
            self.complaints.save(complaint)

        self._logger.info(
            "Complaint status changed",
            complaint_id=complaint.id,
            from_status=previous.value,
            to_status=complaint.status.value,
            actor_id=principal.user_id,
        )
        self._notify(self.composer.complaint_rejected(complaint))
        return complaint

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_complaint(self, complaint_id: str) -> Complaint:
        complaint = self.complaints.get_with_people(complaint_id)
        if complaint is None:
            raise NotFoundError("Complaint", complaint_id)
        return complaint

    def _get_user_with_role(self, user_id: str, role: UserRole, label: str, field: str) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(label, user_id)
        if user.role != role:
            raise InvalidArgumentError(
                f"User {user_id} is not a {role.value.lower()}",
                field=field,
            )
        return user

    def _next_ticket_number(self) -> str:
        # The unique constraint still rejects a collision that slips through
        ticket_number = generate_ticket_number()
        attempts = 1
        while self.tickets.exists_by_ticket_number(ticket_number) and attempts < TICKET_NUMBER_MAX_ATTEMPTS:
            ticket_number = generate_ticket_number()
            attempts += 1
        return ticket_number
