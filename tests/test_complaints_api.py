from conftest import API, auth_headers, file_complaint

from hostel_ops.models.enums import UserRole


def test_file_complaint_creates_submitted_complaint(client, student, warden):
    body = file_complaint(client, student, "ELECTRICIAN")

    assert body["status"] == "SUBMITTED"
    assert body["complaintType"] == "ELECTRICIAN"
    assert body["studentId"] == student.id
    assert body["studentName"] == "Asha Student"
    assert body["assignedToId"] is None
    assert body["location"] == "Block A, Room 12"


def test_file_complaint_notifies_every_warden(client, student, make_user, outbox):
    wardens = [make_user(UserRole.WARDEN), make_user(UserRole.WARDEN)]
    make_user(UserRole.CLEANER)

    file_complaint(client, student, "CLEANER")

    messages = list(outbox)
    assert sorted(m.recipient for m in messages) == sorted(w.email for w in wardens)
    assert all(m.subject == "New Complaint Submitted: CLEANER" for m in messages)
    assert "Student: Asha Student" in messages[0].body


def test_file_complaint_accepts_snake_case(client, student):
    response = client.post(
        f"{API}/complaints",
        json={"complaint_type": "CLEANER", "location": "Mess hall", "description": "Spill"},
        headers=auth_headers(student),
    )

    assert response.status_code == 201
    assert response.json()["location"] == "Mess hall"


def test_file_complaint_rejects_blank_fields(client, student):
    response = client.post(
        f"{API}/complaints",
        json={"complaintType": "CLEANER", "location": "   ", "description": "Spill"},
        headers=auth_headers(student),
    )

    assert response.status_code == 422


def test_file_complaint_rejects_unknown_type(client, student):
    response = client.post(
        f"{API}/complaints",
        json={"complaintType": "PLUMBER", "location": "Room 4", "description": "Leak"},
        headers=auth_headers(student),
    )

    assert response.status_code == 422


def test_only_students_file_complaints(client, warden):
    response = client.post(
        f"{API}/complaints",
        json={"complaintType": "CLEANER", "location": "Room 4", "description": "Dust"},
        headers=auth_headers(warden),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTHORIZATION_FAILED"


def test_filing_requires_a_token(client):
    response = client.post(
        f"{API}/complaints",
        json={"complaintType": "CLEANER", "location": "Room 4", "description": "Dust"},
    )

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["error"]["type"] == "AuthenticationError"


def test_my_complaints_lists_only_own(client, student, make_user):
    other = make_user(UserRole.STUDENT)
    mine = file_complaint(client, student)
    file_complaint(client, other)

    response = client.get(f"{API}/complaints/my-complaints", headers=auth_headers(student))

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [mine["id"]]


def test_responses_carry_request_id(client, student):
    response = client.get(
        f"{API}/complaints/my-complaints",
        headers={**auth_headers(student), "X-Request-ID": "req-123"},
    )

    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Process-Time" in response.headers
