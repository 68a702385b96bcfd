# hostel_ops/api/deps.py
"""
FastAPI dependencies: database session, caller identity, role gates and
service factories.

Example usage in a router:

    @router.get("/complaints")
    def list_complaints(
        principal: Principal = Depends(require_roles(UserRole.WARDEN)),
        service: WardenService = Depends(get_warden_service),
    ):
        ...
"""
from typing import Callable, Generator, Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from hostel_ops.config import settings
from hostel_ops.core.notifications import NotificationDispatcher
from hostel_ops.models.enums import UserRole
from hostel_ops.services.admin_service import AdminService
from hostel_ops.services.auth_service import AuthService
from hostel_ops.services.complaint_service import ComplaintService
from hostel_ops.services.dashboard_service import DashboardService
from hostel_ops.services.employee_service import EmployeeService
from hostel_ops.services.permissions import Principal, require_role
from hostel_ops.services.warden_service import WardenService

# Missing tokens surface as AuthenticationError so every 401 has one shape
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_PREFIX}/auth/login",
    auto_error=False,
)


# ------------------------------------------------------------------ #
# DB / notifications
# ------------------------------------------------------------------ #
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Yield a session from the application's session factory and close it
    when the request finishes.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_notifications(request: Request) -> NotificationDispatcher:
    return request.app.state.notifications


# ------------------------------------------------------------------ #
# Current user
# ------------------------------------------------------------------ #
def get_current_principal(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Principal:
    """
    Decode the bearer token and load its account.

    Raises AuthenticationError (401) on a missing, invalid or expired token.
    """
    user = AuthService(db).resolve_token(token)
    return Principal.from_user(user)


def require_roles(*roles: UserRole) -> Callable[..., Principal]:
    """Build a dependency that admits only callers holding one of ``roles``."""

    def _role_gate(principal: Principal = Depends(get_current_principal)) -> Principal:
        require_role(principal, roles)
        return principal

    return _role_gate


# ------------------------------------------------------------------ #
# Service factories
# ------------------------------------------------------------------ #
def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_complaint_service(
    db: Session = Depends(get_db),
    notifications: NotificationDispatcher = Depends(get_notifications),
) -> ComplaintService:
    return ComplaintService(db, notifications)


def get_warden_service(
    db: Session = Depends(get_db),
    notifications: NotificationDispatcher = Depends(get_notifications),
) -> WardenService:
    return WardenService(db, notifications)


def get_employee_service(
    db: Session = Depends(get_db),
    notifications: NotificationDispatcher = Depends(get_notifications),
) -> EmployeeService:
    return EmployeeService(db, notifications)


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardService:
    return DashboardService(db)


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    return AdminService(db)
