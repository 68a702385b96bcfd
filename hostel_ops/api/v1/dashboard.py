"""
Dashboard endpoints.
"""
from fastapi import APIRouter, Depends

from hostel_ops.api.deps import get_dashboard_service, require_roles
from hostel_ops.models.enums import UserRole
from hostel_ops.schemas.dashboard import DashboardStats
from hostel_ops.services.dashboard_service import DashboardService
from hostel_ops.services.permissions import Principal

router = APIRouter(prefix="/dashboard", tags=["Analytics & Reporting"])


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    _: Principal = Depends(require_roles(UserRole.ADMIN, UserRole.WARDEN)),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.get_stats()
