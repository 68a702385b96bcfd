from datetime import datetime, timezone

import pytest

from hostel_ops.core import notifications
from hostel_ops.core.background_tasks import celery_app
from hostel_ops.core.constants import TASK_SEND_EMAIL
from hostel_ops.core.notifications import (
    EmailDeliveryError,
    EmailSender,
    NotificationDispatcher,
    OutboundMessage,
    send_email,
)
from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintType
from hostel_ops.models.user import User
from hostel_ops.services.notification_service import NotificationComposer


class FlakySender:
    """Fails on the first message, records the rest."""

    def __init__(self):
        self.calls = 0
        self.delivered = []

    def __call__(self, message):
        self.calls += 1
        if self.calls == 1:
            raise EmailDeliveryError("SMTP error: connection refused")
        self.delivered.append(message)


def message(n: int) -> OutboundMessage:
    return OutboundMessage(recipient=f"user{n}@college.edu", subject=f"Subject {n}", body="Body")


def test_send_email_task_is_registered_without_retries():
    assert send_email.name == TASK_SEND_EMAIL
    assert send_email.max_retries == 0
    assert TASK_SEND_EMAIL in celery_app.tasks


def test_delivery_failure_does_not_stop_later_messages(monkeypatch):
    sender = FlakySender()
    monkeypatch.setattr(EmailSender, "send", sender)

    dispatched = NotificationDispatcher(enabled=True).dispatch_many([message(n) for n in range(3)])

    assert dispatched == 3
    assert [m.recipient for m in sender.delivered] == ["user1@college.edu", "user2@college.edu"]


def test_failed_delivery_is_not_retried(monkeypatch):
    sender = FlakySender()
    monkeypatch.setattr(EmailSender, "send", sender)

    result = send_email.delay(message(0).to_payload())

    assert result.get() is False
    assert sender.calls == 1


def test_disabled_dispatcher_drops_messages(outbox):
    dispatcher = NotificationDispatcher(enabled=False)

    assert dispatcher.dispatch(message(1)) is False
    assert outbox == []


def test_broker_outage_does_not_reach_caller(monkeypatch):
    class UnreachableBroker:
        def delay(self, payload):
            raise ConnectionError("Error 111 connecting to localhost:6379")

    monkeypatch.setattr(notifications, "send_email", UnreachableBroker())

    assert NotificationDispatcher(enabled=True).dispatch_many([message(1), message(2)]) == 0


def test_payload_keeps_message_fields():
    original = OutboundMessage(
        recipient="asha@college.edu",
        subject="Hello",
        body="Line one\nLine two",
        created_at=datetime(2024, 1, 31, 9, 30, tzinfo=timezone.utc),
    )

    assert OutboundMessage.from_payload(original.to_payload()) == original


def test_sender_without_smtp_host_only_logs(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("SMTP must not be used")

    monkeypatch.setattr("smtplib.SMTP", fail)
    sender = EmailSender(host="")

    assert not sender.configured
    sender.send(message(1))


def test_sender_wraps_smtp_errors(monkeypatch):
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("Connection refused")

    monkeypatch.setattr("smtplib.SMTP", refuse)
    sender = EmailSender(host="smtp.college.edu")

    with pytest.raises(EmailDeliveryError, match="Connection refused"):
        sender.send(message(1))


def test_sender_builds_plain_text_message():
    sender = EmailSender(host="smtp.college.edu")

    msg = sender.build_message(message(7))

    assert msg["To"] == "user7@college.edu"
    assert msg["Subject"] == "Subject 7"
    assert msg.get_content().strip() == "Body"


def test_composer_renders_warden_alerts():
    student = User(full_name="Asha", email="asha@college.edu")
    wardens = [User(full_name="W1", email="w1@college.edu"), User(full_name="W2", email="w2@college.edu")]
    complaint = Complaint(
        complaint_type=ComplaintType.ELECTRICIAN,
        location="Room 9",
        description="Light flickers",
    )

    messages = NotificationComposer().complaint_submitted(complaint, student, wardens)

    assert [m.recipient for m in messages] == ["w1@college.edu", "w2@college.edu"]
    assert messages[0].subject == "New Complaint Submitted: ELECTRICIAN"
    assert "Location: Room 9" in messages[0].body
    assert "Description: Light flickers" in messages[0].body
