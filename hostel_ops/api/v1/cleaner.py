"""
Cleaner endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hostel_ops.api.deps import get_employee_service, require_roles
from hostel_ops.models.enums import UserRole
from hostel_ops.schemas.complaint import CleaningTaskResponse, ComplaintResponse
from hostel_ops.services.employee_service import EmployeeService
from hostel_ops.services.permissions import Principal

router = APIRouter(prefix="/cleaner", tags=["Cleaner"])


@router.get("/tasks", response_model=List[CleaningTaskResponse])
def list_tasks(
    cleaner_id: Optional[str] = Query(None, alias="cleanerId"),
    principal: Principal = Depends(require_roles(UserRole.CLEANER)),
    service: EmployeeService = Depends(get_employee_service),
):
    """Cleaning tasks in progress for the calling cleaner."""
    tasks = service.cleaning_tasks(principal, cleaner_id)
    return [CleaningTaskResponse.from_model(c) for c in tasks]


@router.post("/tasks/{complaint_id}/complete", response_model=ComplaintResponse)
def complete_task(
    complaint_id: str,
    principal: Principal = Depends(require_roles(UserRole.CLEANER)),
    service: EmployeeService = Depends(get_employee_service),
):
    complaint = service.complete_cleaning_task(principal, complaint_id)
    return ComplaintResponse.from_model(complaint)
