"""
Student complaint endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from hostel_ops.api.deps import get_complaint_service, require_roles
from hostel_ops.models.enums import UserRole
from hostel_ops.schemas.complaint import ComplaintCreateRequest, ComplaintResponse
from hostel_ops.services.complaint_service import ComplaintService
from hostel_ops.services.permissions import Principal

router = APIRouter(prefix="/complaints", tags=["Complaint Management"])


@router.post("", response_model=ComplaintResponse, status_code=status.HTTP_201_CREATED)
def file_complaint(
    request: ComplaintCreateRequest,
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    service: ComplaintService = Depends(get_complaint_service),
):
    return ComplaintResponse.from_model(service.file_complaint(principal, request))


@router.get("/my-complaints", response_model=List[ComplaintResponse])
def my_complaints(
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    service: ComplaintService = Depends(get_complaint_service),
):
    return [ComplaintResponse.from_model(c) for c in service.my_complaints(principal)]
