import re
import uuid

from conftest import API, auth_headers, file_complaint

from hostel_ops.core.constants import TICKET_NUMBER_PATTERN
from hostel_ops.models.enums import UserRole


def create_ticket(client, warden, complaint_id, electrician_id):
    return client.post(
        f"{API}/warden/tickets",
        json={"complaintId": complaint_id, "electricianId": electrician_id},
        headers=auth_headers(warden),
    )


def resolve(client, electrician, ticket_id, notes="Replaced the capacitor"):
    return client.patch(
        f"{API}/electrician/tickets/{ticket_id}/resolve",
        json={"resolutionNotes": notes},
        headers=auth_headers(electrician),
    )


def test_ticket_generation_and_resolution(client, student, warden, electrician, outbox):
    complaint = file_complaint(client, student, "ELECTRICIAN")
    outbox.clear()

    created = create_ticket(client, warden, complaint["id"], electrician.id)

    assert created.status_code == 201
    ticket = created.json()
    assert re.match(TICKET_NUMBER_PATTERN, ticket["ticketNumber"])
    assert ticket["status"] == "OPEN"
    assert ticket["complaintId"] == complaint["id"]
    assert ticket["assignedToId"] == electrician.id
    assert ticket["assignedToName"] == "Vikram Electrician"
    assert ticket["wardenId"] == warden.id
    assert ticket["wardenName"] == "Ravi Warden"
    assert ticket["complaintDescription"] == "Fan not working"
    assert ticket["resolvedAt"] is None

    messages = {m.recipient: m for m in outbox}
    assert messages[student.email].subject == f"Ticket Generated for Your Complaint: {ticket['ticketNumber']}"
    assert messages[electrician.email].subject == f"New Ticket Assigned to You: {ticket['ticketNumber']}"

    mine = client.get(f"{API}/complaints/my-complaints", headers=auth_headers(student)).json()
    assert mine[0]["status"] == "IN_PROGRESS"
    assert mine[0]["assignedToId"] is None

    listed = client.get(f"{API}/electrician/tickets", headers=auth_headers(electrician))
    assert [t["id"] for t in listed.json()] == [ticket["id"]]

    outbox.clear()
    resolved = resolve(client, electrician, ticket["id"])

    assert resolved.status_code == 200
    body = resolved.json()
    assert body["status"] == "RESOLVED"
    assert body["resolutionNotes"] == "Replaced the capacitor"
    assert body["resolvedAt"] is not None

    messages = list(outbox)
    assert sorted(m.recipient for m in messages) == sorted([student.email, warden.email])
    assert all(m.subject == f"Ticket Resolved: {ticket['ticketNumber']}" for m in messages)

    mine = client.get(f"{API}/complaints/my-complaints", headers=auth_headers(student)).json()
    assert mine[0]["status"] == "COMPLETED"
    assert client.get(f"{API}/electrician/tickets", headers=auth_headers(electrician)).json() == []


def test_second_ticket_for_complaint_is_rejected(client, student, warden, electrician):
    complaint = file_complaint(client, student, "ELECTRICIAN")
    create_ticket(client, warden, complaint["id"], electrician.id)

    response = create_ticket(client, warden, complaint["id"], electrician.id)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVALID_STATE"


def test_ticket_requires_electrician_role(client, student, warden, cleaner):
    complaint = file_complaint(client, student, "ELECTRICIAN")

    response = create_ticket(client, warden, complaint["id"], cleaner.id)

    assert response.status_code == 400
    mine = client.get(f"{API}/complaints/my-complaints", headers=auth_headers(student)).json()
    assert mine[0]["status"] == "SUBMITTED"


def test_ticket_for_unknown_complaint(client, warden, electrician):
    response = create_ticket(client, warden, str(uuid.uuid4()), electrician.id)

    assert response.status_code == 404


def test_ticket_for_rejected_complaint(client, student, warden, electrician):
    complaint = file_complaint(client, student, "ELECTRICIAN")
    client.post(f"{API}/warden/complaints/{complaint['id']}/reject", headers=auth_headers(warden))

    response = create_ticket(client, warden, complaint["id"], electrician.id)

    assert response.status_code == 409


def test_only_assignee_resolves_ticket(client, student, warden, electrician, make_user):
    complaint = file_complaint(client, student, "ELECTRICIAN")
    ticket = create_ticket(client, warden, complaint["id"], electrician.id).json()
    other = make_user(UserRole.ELECTRICIAN)

    response = resolve(client, other, ticket["id"])

    assert response.status_code == 403
    assert client.get(f"{API}/electrician/tickets", headers=auth_headers(other)).json() == []


def test_resolved_ticket_cannot_be_resolved_again(client, student, warden, electrician):
    complaint = file_complaint(client, student, "ELECTRICIAN")
    ticket = create_ticket(client, warden, complaint["id"], electrician.id).json()
    resolve(client, electrician, ticket["id"])

    response = resolve(client, electrician, ticket["id"], notes="Again")

    assert response.status_code == 409
    assert response.json()["error"]["details"]["current_state"] == "RESOLVED"


def test_resolve_unknown_ticket(client, electrician):
    response = resolve(client, electrician, str(uuid.uuid4()))

    assert response.status_code == 404


def test_admin_history_includes_ticket_data(client, student, warden, electrician, admin):
    cleaning = file_complaint(client, student, "CLEANER")
    electrical = file_complaint(client, student, "ELECTRICIAN")
    ticket = create_ticket(client, warden, electrical["id"], electrician.id).json()
    resolve(client, electrician, ticket["id"], notes="Rewired switch")

    response = client.get(f"{API}/admin/complaints/all", headers=auth_headers(admin))

    assert response.status_code == 200
    by_id = {c["id"]: c for c in response.json()}
    assert by_id[cleaning["id"]]["ticketId"] is None
    history = by_id[electrical["id"]]
    assert history["ticketId"] == ticket["id"]
    assert history["ticketNumber"] == ticket["ticketNumber"]
    assert history["ticketAssignedTo"] == "Vikram Electrician"
    assert history["resolutionNotes"] == "Rewired switch"
    assert history["resolvedAt"] is not None
    assert history["studentName"] == "Asha Student"


def test_complaint_with_open_ticket_cannot_be_rejected(client, student, warden, electrician):
    complaint = file_complaint(client, student, "ELECTRICIAN")
    ticket = create_ticket(client, warden, complaint["id"], electrician.id).json()

    response = client.post(f"{API}/warden/complaints/{complaint['id']}/reject", headers=auth_headers(warden))

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "INVALID_STATE"
    assert error["details"]["ticket_number"] == ticket["ticketNumber"]

    listed = client.get(f"{API}/electrician/tickets", headers=auth_headers(electrician)).json()
    assert [t["id"] for t in listed] == [ticket["id"]]
    assert resolve(client, electrician, ticket["id"]).status_code == 200
    mine = client.get(f"{API}/complaints/my-complaints", headers=auth_headers(student)).json()
    assert mine[0]["status"] == "COMPLETED"
