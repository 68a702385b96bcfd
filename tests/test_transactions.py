import pytest
from sqlalchemy import func, select

from conftest import principal_for

from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus, ComplaintType, TicketStatus
from hostel_ops.models.ticket import Ticket
from hostel_ops.repositories.complaint_repository import ComplaintRepository
from hostel_ops.repositories.ticket_repository import TicketRepository
from hostel_ops.schemas.complaint import ComplaintCreateRequest
from hostel_ops.schemas.ticket import TicketCreateRequest
from hostel_ops.services import warden_service
from hostel_ops.services.complaint_service import ComplaintService
from hostel_ops.services.employee_service import EmployeeService
from hostel_ops.services.errors import AlreadyExistsError
from hostel_ops.services.warden_service import WardenService

FIXED_NUMBER = "TKT-20240131-deadbeef"


def file_electrical(db_session, student) -> Complaint:
    request = ComplaintCreateRequest(
        complaint_type=ComplaintType.ELECTRICIAN,
        location="Block B, Room 3",
        description="Socket sparks",
    )
    return ComplaintService(db_session).file_complaint(principal_for(student), request)


def test_failed_ticket_insert_leaves_complaint_untouched(
    db_session, session_factory, student, warden, electrician, monkeypatch
):
    first = file_electrical(db_session, student)
    second = file_electrical(db_session, student)
    service = WardenService(db_session)
    monkeypatch.setattr(warden_service, "generate_ticket_number", lambda: FIXED_NUMBER)

    service.create_ticket(
        principal_for(warden),
        TicketCreateRequest(complaint_id=first.id, electrician_id=electrician.id),
    )

    # Force the storage-level unique constraint to be the one that trips
    monkeypatch.setattr(TicketRepository, "exists_by_ticket_number", lambda self, number: False)
    with pytest.raises(AlreadyExistsError):
        service.create_ticket(
            principal_for(warden),
            TicketCreateRequest(complaint_id=second.id, electrician_id=electrician.id),
        )

    check = session_factory()
    try:
        reloaded = check.get(Complaint, second.id)
        assert reloaded.status == ComplaintStatus.SUBMITTED
        assert reloaded.assigned_to_id is None
        assert check.scalar(select(func.count()).select_from(Ticket)) == 1
        assert check.get(Complaint, first.id).status == ComplaintStatus.IN_PROGRESS
    finally:
        check.close()


def test_colliding_ticket_number_is_regenerated(db_session, student, warden, electrician, monkeypatch):
    first = file_electrical(db_session, student)
    second = file_electrical(db_session, student)
    service = WardenService(db_session)
    numbers = iter([FIXED_NUMBER, FIXED_NUMBER, "TKT-20240131-0badf00d"])
    monkeypatch.setattr(warden_service, "generate_ticket_number", lambda: next(numbers))

    one = service.create_ticket(
        principal_for(warden),
        TicketCreateRequest(complaint_id=first.id, electrician_id=electrician.id),
    )
    two = service.create_ticket(
        principal_for(warden),
        TicketCreateRequest(complaint_id=second.id, electrician_id=electrician.id),
    )

    assert one.ticket_number == FIXED_NUMBER
    assert two.ticket_number == "TKT-20240131-0badf00d"


def test_failed_complaint_update_leaves_ticket_open(
    db_session, session_factory, student, warden, electrician, monkeypatch
):
    complaint = file_electrical(db_session, student)
    ticket = WardenService(db_session).create_ticket(
        principal_for(warden),
        TicketCreateRequest(complaint_id=complaint.id, electrician_id=electrician.id),
    )

    def fail_save(self, entity, *args, **kwargs):
        raise RuntimeError("disk I/O error")

    monkeypatch.setattr(ComplaintRepository, "save", fail_save)
    with pytest.raises(RuntimeError):
        EmployeeService(db_session).resolve_ticket(principal_for(electrician), ticket.id, "Fixed")

    check = session_factory()
    try:
        reloaded_ticket = check.get(Ticket, ticket.id)
        assert reloaded_ticket.status == TicketStatus.OPEN
        assert reloaded_ticket.resolved_at is None
        assert reloaded_ticket.resolution_notes is None
        assert check.get(Complaint, complaint.id).status == ComplaintStatus.IN_PROGRESS
    finally:
        check.close()
