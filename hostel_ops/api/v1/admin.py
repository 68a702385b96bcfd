"""
Administration endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from hostel_ops.api.deps import get_admin_service, get_auth_service, require_roles
from hostel_ops.models.enums import UserRole
from hostel_ops.schemas.complaint import AdminComplaintResponse
from hostel_ops.schemas.user import UserCreateRequest, UserResponse
from hostel_ops.services.admin_service import AdminService
from hostel_ops.services.auth_service import AuthService
from hostel_ops.services.permissions import Principal

router = APIRouter(prefix="/admin", tags=["Admin Management"])


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    request: UserCreateRequest,
    _: Principal = Depends(require_roles(UserRole.ADMIN)),
    service: AuthService = Depends(get_auth_service),
):
    """Create an account with any role."""
    return UserResponse.from_model(service.create_user(request))


@router.get("/users/all", response_model=List[UserResponse])
def list_users(
    _: Principal = Depends(require_roles(UserRole.ADMIN)),
    service: AdminService = Depends(get_admin_service),
):
    return [UserResponse.from_model(u) for u in service.list_users()]


@router.get("/users", response_model=List[UserResponse])
def list_users_by_role(
    role: UserRole = Query(...),
    _: Principal = Depends(require_roles(UserRole.ADMIN, UserRole.WARDEN)),
    service: AdminService = Depends(get_admin_service),
):
    return [UserResponse.from_model(u) for u in service.list_users_by_role(role)]


@router.get("/complaints/all", response_model=List[AdminComplaintResponse])
def complaint_history(
    _: Principal = Depends(require_roles(UserRole.ADMIN)),
    service: AdminService = Depends(get_admin_service),
):
    """Every complaint with its ticket details, newest first."""
    return [AdminComplaintResponse.from_model(c) for c in service.complaint_history()]
