"""
Student-facing complaint operations.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostel_ops.core.notifications import NotificationDispatcher
from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus, UserRole
from hostel_ops.repositories.complaint_repository import ComplaintRepository
from hostel_ops.repositories.user_repository import UserRepository
from hostel_ops.schemas.complaint import ComplaintCreateRequest
from hostel_ops.services.base_service import BaseService
from hostel_ops.services.errors import NotFoundError
from hostel_ops.services.notification_service import NotificationComposer
from hostel_ops.services.permissions import Principal


class ComplaintService(BaseService):
    """Filing and listing of a student's own complaints."""

    def __init__(
        self,
        db_session: Session,
        notifications: Optional[NotificationDispatcher] = None,
        composer: Optional[NotificationComposer] = None,
    ):
        super().__init__(db_session, notifications)
        self.complaints = ComplaintRepository(db_session)
        self.users = UserRepository(db_session)
        self.composer = composer or NotificationComposer()

    def file_complaint(self, principal: Principal, request: ComplaintCreateRequest) -> Complaint:
        """
        Create a SUBMITTED complaint for the calling student and alert every
        warden.

        Raises:
            NotFoundError: If the caller's account no longer exists
        """
        student = self.users.get_by_id(principal.user_id)
        if student is None:
            raise NotFoundError("Student", principal.user_id)

        complaint = Complaint(
            student=student,
            complaint_type=request.complaint_type,
            location=request.location,
            description=request.description,
            status=ComplaintStatus.SUBMITTED,
        )
        with self.transaction():
            self.complaints.create(complaint)

        self._logger.info(
            "Complaint submitted",
            complaint_id=complaint.id,
            complaint_type=complaint.complaint_type.value,
            student_id=student.id,
        )

        wardens = self.users.find_by_role(UserRole.WARDEN)
        self._notify(self.composer.complaint_submitted(complaint, student, wardens))
        return complaint

    def my_complaints(self, principal: Principal) -> List[Complaint]:
        return self.complaints.find_by_student_id(principal.user_id)
