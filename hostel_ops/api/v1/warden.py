"""
Warden endpoints: complaint triage and ticket generation.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from hostel_ops.api.deps import get_warden_service, require_roles
from hostel_ops.models.enums import UserRole
from hostel_ops.schemas.complaint import ComplaintResponse
from hostel_ops.schemas.ticket import TicketCreateRequest, TicketResponse
from hostel_ops.schemas.user import UserResponse
from hostel_ops.services.permissions import Principal
from hostel_ops.services.warden_service import WardenService

router = APIRouter(prefix="/warden", tags=["Warden"])

warden_only = require_roles(UserRole.WARDEN)


@router.get("/complaints", response_model=List[ComplaintResponse])
def list_complaints(
    _: Principal = Depends(warden_only),
    service: WardenService = Depends(get_warden_service),
):
    return [ComplaintResponse.from_model(c) for c in service.list_complaints()]


@router.get("/cleaners", response_model=List[UserResponse])
def list_cleaners(
    _: Principal = Depends(warden_only),
    service: WardenService = Depends(get_warden_service),
):
    return [UserResponse.from_model(u) for u in service.list_cleaners()]


@router.post("/tickets", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(
    request: TicketCreateRequest,
    principal: Principal = Depends(warden_only),
    service: WardenService = Depends(get_warden_service),
):
    """Escalate a complaint to an electrician."""
    return TicketResponse.from_model(service.create_ticket(principal, request))


@router.post("/complaints/{complaint_id}/approve-cleaning", response_model=ComplaintResponse)
def approve_cleaning(
    complaint_id: str,
    cleaner_id: str = Query(..., alias="cleanerId"),
    principal: Principal = Depends(warden_only),
    service: WardenService = Depends(get_warden_service),
):
    complaint = service.approve_cleaning(principal, complaint_id, cleaner_id)
    return ComplaintResponse.from_model(complaint)


@router.post("/complaints/{complaint_id}/reject", response_model=ComplaintResponse)
def reject_complaint(
    complaint_id: str,
    principal: Principal = Depends(warden_only),
    service: WardenService = Depends(get_warden_service),
):
    return ComplaintResponse.from_model(service.reject_complaint(principal, complaint_id))
