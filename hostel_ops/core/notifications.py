"""
Notification Delivery

Outbound e-mail messages, SMTP delivery and the Celery task that sends
them. Services only dispatch; delivery happens on a Celery worker and
failures are logged and dropped.
"""

import smtplib
import ssl
from dataclasses import dataclass, field
from datetime import datetime
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any, Dict, List, Optional

from hostel_ops.config import settings
from hostel_ops.core.background_tasks import celery_app
from hostel_ops.core.constants import TASK_SEND_EMAIL
from hostel_ops.core.logging import get_logger
from hostel_ops.models.base import utcnow

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutboundMessage:
    """A plain-text e-mail waiting to be delivered"""
    recipient: str
    subject: str
    body: str
    created_at: datetime = field(default_factory=utcnow)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-safe form used as the task argument"""
        return {
            "recipient": self.recipient,
            "subject": self.subject,
            "body": self.body,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "OutboundMessage":
        created_at = payload.get("created_at")
        return cls(
            recipient=payload["recipient"],
            subject=payload["subject"],
            body=payload["body"],
            created_at=datetime.fromisoformat(created_at) if created_at else utcnow(),
        )


class EmailDeliveryError(Exception):
    """Raised by the sender when SMTP delivery fails"""


class EmailSender:
    """SMTP e-mail delivery provider"""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: Optional[bool] = None,
        timeout: Optional[float] = None,
    ):
        self.smtp_server = host if host is not None else settings.SMTP_HOST
        self.smtp_port = port if port is not None else settings.SMTP_PORT
        self.username = username if username is not None else settings.SMTP_USERNAME
        self.password = password if password is not None else settings.SMTP_PASSWORD
        self.use_tls = settings.SMTP_USE_TLS if use_tls is None else use_tls
        self.timeout = timeout if timeout is not None else settings.SMTP_TIMEOUT_SECONDS
        self.from_address = settings.EMAIL_FROM_ADDRESS
        self.from_name = settings.EMAIL_FROM_NAME

    @property
    def configured(self) -> bool:
        return bool(self.smtp_server)

    def build_message(self, message: OutboundMessage) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = message.subject
        msg["From"] = formataddr((self.from_name, self.from_address))
        msg["To"] = message.recipient
        msg.set_content(message.body)
        return msg

    def send(self, message: OutboundMessage) -> None:
        """
        Deliver one message.

        Without an SMTP host the message is only logged, which keeps local
        development usable without a mail server.

        Raises:
            EmailDeliveryError: If the SMTP exchange fails
        """
        if not self.configured:
            logger.info(
                "SMTP not configured, email logged only",
                recipient=message.recipient,
                subject=message.subject,
                body=message.body,
            )
            return

        msg = self.build_message(message)
        try:
            with smtplib.SMTP(self.smtp_server, self.smtp_port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls(context=ssl.create_default_context())
                if self.username:
                    server.login(self.username, self.password or "")
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"SMTP error: {e}") from e

        logger.info("Email sent", recipient=message.recipient, subject=message.subject)


@celery_app.task(name=TASK_SEND_EMAIL, max_retries=0, ignore_result=True)
def send_email(payload: Dict[str, Any]) -> bool:
    """
    Deliver one message. Each message gets exactly one attempt.

    Returns False when delivery failed; the failure is logged, not raised.
    """
    message = OutboundMessage.from_payload(payload)
    try:
        EmailSender().send(message)
    except Exception as e:
        logger.error(
            "Notification delivery failed",
            recipient=message.recipient,
            subject=message.subject,
            error=str(e),
            exc_info=True,
        )
        return False
    return True


class NotificationDispatcher:
    """
    Hands outbound messages to the ``send_email`` task.

    When notifications are disabled, messages are logged and discarded.
    A broker error is logged and never reaches the caller.
    """

    def __init__(self, enabled: Optional[bool] = None):
        self.enabled = settings.NOTIFICATIONS_ENABLED if enabled is None else enabled

    def dispatch(self, message: OutboundMessage) -> bool:
        if not self.enabled:
            logger.info(
                "Notifications disabled, dropping message",
                recipient=message.recipient,
                subject=message.subject,
            )
            return False
        try:
            send_email.delay(message.to_payload())
        except Exception as e:
            logger.error(
                "Notification dispatch failed, dropping message",
                recipient=message.recipient,
                subject=message.subject,
                error=str(e),
            )
            return False
        logger.debug("Notification dispatched", recipient=message.recipient, subject=message.subject)
        return True

    def dispatch_many(self, messages: List[OutboundMessage]) -> int:
        """Dispatch each message; returns how many were handed off"""
        return sum(1 for message in messages if self.dispatch(message))


__all__ = [
    "OutboundMessage",
    "EmailDeliveryError",
    "EmailSender",
    "send_email",
    "NotificationDispatcher",
]
