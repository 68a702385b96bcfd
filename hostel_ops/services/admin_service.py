"""
Administrative listings.
"""

from typing import List

from sqlalchemy.orm import Session

from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import UserRole
from hostel_ops.models.user import User
from hostel_ops.repositories.complaint_repository import ComplaintRepository
from hostel_ops.repositories.user_repository import UserRepository
from hostel_ops.services.base_service import BaseService


class AdminService(BaseService):
    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.users = UserRepository(db_session)
        self.complaints = ComplaintRepository(db_session)

    def list_users(self) -> List[User]:
        return self.users.find_all_ordered()

    def list_users_by_role(self, role: UserRole) -> List[User]:
        return self.users.find_by_role(role)

    def complaint_history(self) -> List[Complaint]:
        """Every complaint with its ticket (if any), loaded in one query."""
        return self.complaints.find_all_with_ticket_data()
