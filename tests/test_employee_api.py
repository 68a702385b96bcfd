import uuid

from conftest import API, auth_headers, file_complaint

from hostel_ops.models.enums import UserRole


def assign_cleaning(client, student, warden, cleaner) -> dict:
    complaint = file_complaint(client, student, "CLEANER")
    response = client.post(
        f"{API}/warden/complaints/{complaint['id']}/approve-cleaning",
        params={"cleanerId": cleaner.id},
        headers=auth_headers(warden),
    )
    assert response.status_code == 200
    return response.json()


def test_cleaner_sees_assigned_tasks(client, student, warden, cleaner, make_user):
    complaint = assign_cleaning(client, student, warden, cleaner)
    assign_cleaning(client, student, warden, make_user(UserRole.CLEANER))

    response = client.get(f"{API}/cleaner/tasks", headers=auth_headers(cleaner))

    assert response.status_code == 200
    tasks = response.json()
    assert [t["id"] for t in tasks] == [complaint["id"]]
    assert set(tasks[0]) == {"id", "complaintType", "description", "location", "createdAt"}


def test_cleaner_id_parameter_must_match_caller(client, cleaner, make_user):
    other = make_user(UserRole.CLEANER)

    own = client.get(f"{API}/cleaner/tasks", params={"cleanerId": cleaner.id}, headers=auth_headers(cleaner))
    foreign = client.get(f"{API}/cleaner/tasks", params={"cleanerId": other.id}, headers=auth_headers(cleaner))

    assert own.status_code == 200
    assert foreign.status_code == 403


def test_complete_cleaning_task(client, student, warden, cleaner, outbox):
    complaint = assign_cleaning(client, student, warden, cleaner)
    outbox.clear()

    response = client.post(f"{API}/cleaner/tasks/{complaint['id']}/complete", headers=auth_headers(cleaner))

    assert response.status_code == 200
    assert response.json()["status"] == "COMPLETED"
    [message] = list(outbox)
    assert message.recipient == student.email
    assert message.subject == "Your Complaint has been Resolved"

    remaining = client.get(f"{API}/cleaner/tasks", headers=auth_headers(cleaner))
    assert remaining.json() == []


def test_only_assignee_completes_task(client, student, warden, cleaner, make_user):
    complaint = assign_cleaning(client, student, warden, cleaner)
    other = make_user(UserRole.CLEANER)

    response = client.post(f"{API}/cleaner/tasks/{complaint['id']}/complete", headers=auth_headers(other))

    assert response.status_code == 403
    mine = client.get(f"{API}/complaints/my-complaints", headers=auth_headers(student)).json()
    assert mine[0]["status"] == "IN_PROGRESS"


def test_unassigned_complaint_cannot_be_completed(client, student, cleaner):
    complaint = file_complaint(client, student, "CLEANER")

    response = client.post(f"{API}/cleaner/tasks/{complaint['id']}/complete", headers=auth_headers(cleaner))

    assert response.status_code == 403


def test_completing_twice_is_invalid(client, student, warden, cleaner):
    complaint = assign_cleaning(client, student, warden, cleaner)
    url = f"{API}/cleaner/tasks/{complaint['id']}/complete"
    client.post(url, headers=auth_headers(cleaner))

    response = client.post(url, headers=auth_headers(cleaner))

    assert response.status_code == 409


def test_complete_unknown_task(client, cleaner):
    response = client.post(f"{API}/cleaner/tasks/{uuid.uuid4()}/complete", headers=auth_headers(cleaner))

    assert response.status_code == 404
