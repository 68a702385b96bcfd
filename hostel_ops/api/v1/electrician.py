"""
Electrician endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends

from hostel_ops.api.deps import get_employee_service, require_roles
from hostel_ops.models.enums import UserRole
from hostel_ops.schemas.ticket import TicketResolveRequest, TicketResponse
from hostel_ops.services.employee_service import EmployeeService
from hostel_ops.services.permissions import Principal

router = APIRouter(prefix="/electrician", tags=["Electrician"])


@router.get("/tickets", response_model=List[TicketResponse])
def assigned_tickets(
    principal: Principal = Depends(require_roles(UserRole.ELECTRICIAN)),
    service: EmployeeService = Depends(get_employee_service),
):
    """Tickets assigned to the caller that are not yet resolved."""
    return [TicketResponse.from_model(t) for t in service.assigned_tickets(principal)]


@router.patch("/tickets/{ticket_id}/resolve", response_model=TicketResponse)
def resolve_ticket(
    ticket_id: str,
    request: TicketResolveRequest,
    principal: Principal = Depends(require_roles(UserRole.ELECTRICIAN)),
    service: EmployeeService = Depends(get_employee_service),
):
    ticket = service.resolve_ticket(principal, ticket_id, request.resolution_notes)
    return TicketResponse.from_model(ticket)
