"""
Notification composition.

Turns lifecycle events into outbound e-mails. Subjects and bodies are
Jinja2 templates; rendering happens before dispatch so the delivery
task only ever sees finished messages.
"""

from typing import Any, Dict, Iterable, List, Optional

from jinja2 import DictLoader, Environment, StrictUndefined

from hostel_ops.core.notifications import OutboundMessage
from hostel_ops.models.complaint import Complaint
from hostel_ops.models.ticket import Ticket
from hostel_ops.models.user import User

SIGN_OFF = "Regards,\nHostel Management"

DEFAULT_TEMPLATES: Dict[str, Dict[str, str]] = {
    "complaint_submitted": {
        "subject": "New Complaint Submitted: {{ complaint.complaint_type.value }}",
        "body": (
            "A new complaint has been submitted.\n\n"
            "Student: {{ student.full_name }}\n"
            "Type: {{ complaint.complaint_type.value }}\n"
            "Location: {{ complaint.location }}\n"
            "Description: {{ complaint.description }}\n\n"
            "Please log in to the system to review it."
        ),
    },
    "cleaning_approved": {
        "subject": "Your Complaint is In Progress",
        "body": (
            "Dear {{ student.full_name }},\n\n"
            "Your cleaning complaint regarding '{{ complaint.description }}' "
            "has been approved and assigned to our cleaner.\n\n"
            "{{ sign_off }}"
        ),
    },
    "cleaning_completed": {
        "subject": "Your Complaint has been Resolved",
        "body": (
            "Dear {{ student.full_name }},\n\n"
            "Your cleaning complaint regarding '{{ complaint.description }}' "
            "has been marked as completed.\n\n"
            "Thank you,\nHostel Management"
        ),
    },
    "complaint_rejected": {
        "subject": "Your Complaint has been Rejected",
        "body": (
            "Dear {{ student.full_name }},\n\n"
            "Your complaint regarding '{{ complaint.description }}' "
            "has been rejected by the warden.\n\n"
            "{{ sign_off }}"
        ),
    },
    "ticket_generated_student": {
        "subject": "Ticket Generated for Your Complaint: {{ ticket.ticket_number }}",
        "body": (
            "Dear {{ student.full_name }},\n\n"
            "A ticket has been generated for your complaint regarding "
            "'{{ complaint.description }}'.\n\n"
            "Ticket Number: {{ ticket.ticket_number }}\n"
            "Assigned to: {{ electrician.full_name }}\n\n"
            "{{ sign_off }}"
        ),
    },
    "ticket_generated_electrician": {
        "subject": "New Ticket Assigned to You: {{ ticket.ticket_number }}",
        "body": (
            "Hello {{ electrician.full_name }},\n\n"
            "You have been assigned a new ticket.\n\n"
            "Ticket Number: {{ ticket.ticket_number }}\n"
            "Complaint: {{ complaint.description }}\n"
            "Location: {{ complaint.location }}\n\n"
            "Please log in to the system to view details."
        ),
    },
    "ticket_resolved_student": {
        "subject": "Ticket Resolved: {{ ticket.ticket_number }}",
        "body": (
            "Dear {{ student.full_name }},\n\n"
            "Ticket {{ ticket.ticket_number }} has been resolved.\n\n"
            "Resolution Notes: {{ ticket.resolution_notes or '' }}\n\n"
            "{{ sign_off }}"
        ),
    },
    "ticket_resolved_warden": {
        "subject": "Ticket Resolved: {{ ticket.ticket_number }}",
        "body": (
            "Hello {{ warden.full_name }},\n\n"
            "Ticket {{ ticket.ticket_number }} assigned to "
            "{{ electrician.full_name }} has been resolved."
        ),
    },
}


class NotificationTemplates:
    """Jinja2-backed subject/body renderer."""

    def __init__(self, templates: Dict[str, Dict[str, str]] = DEFAULT_TEMPLATES):
        mapping = {}
        for name, parts in templates.items():
            mapping[f"{name}.subject"] = parts["subject"]
            mapping[f"{name}.body"] = parts["body"]
        # Plain-text e-mail, so no HTML autoescaping
        self.env = Environment(
            loader=DictLoader(mapping),
            undefined=StrictUndefined,
            autoescape=False,
        )

    def render(self, template_name: str, recipient: str, **context: Any) -> OutboundMessage:
        context.setdefault("sign_off", SIGN_OFF)
        subject = self.env.get_template(f"{template_name}.subject").render(**context)
        body = self.env.get_template(f"{template_name}.body").render(**context)
        return OutboundMessage(recipient=recipient, subject=subject.strip(), body=body)


class NotificationComposer:
    """Builds the messages each lifecycle event sends."""

    def __init__(self, templates: Optional[NotificationTemplates] = None):
        self.templates = templates or NotificationTemplates()

    def complaint_submitted(self, complaint: Complaint, student: User, wardens: Iterable[User]) -> List[OutboundMessage]:
        return [
            self.templates.render(
                "complaint_submitted", warden.email, complaint=complaint, student=student
            )
            for warden in wardens
        ]

    def cleaning_approved(self, complaint: Complaint) -> List[OutboundMessage]:
        return [self._to_student("cleaning_approved", complaint)]

    def cleaning_completed(self, complaint: Complaint) -> List[OutboundMessage]:
        return [self._to_student("cleaning_completed", complaint)]

    def complaint_rejected(self, complaint: Complaint) -> List[OutboundMessage]:
        return [self._to_student("complaint_rejected", complaint)]

    def ticket_generated(self, ticket: Ticket, complaint: Complaint, electrician: User) -> List[OutboundMessage]:
        student = complaint.student
        context = dict(ticket=ticket, complaint=complaint, student=student, electrician=electrician)
        return [
            self.templates.render("ticket_generated_student", student.email, **context),
            self.templates.render("ticket_generated_electrician", electrician.email, **context),
        ]

    def ticket_resolved(self, ticket: Ticket) -> List[OutboundMessage]:
        complaint = ticket.complaint
        context = dict(
            ticket=ticket,
            complaint=complaint,
            student=complaint.student,
            warden=ticket.warden,
            electrician=ticket.assigned_to,
        )
        return [
            self.templates.render("ticket_resolved_student", complaint.student.email, **context),
            self.templates.render("ticket_resolved_warden", ticket.warden.email, **context),
        ]

    def _to_student(self, template_name: str, complaint: Complaint) -> OutboundMessage:
        student = complaint.student
        return self.templates.render(template_name, student.email, complaint=complaint, student=student)


__all__ = ["DEFAULT_TEMPLATES", "NotificationTemplates", "NotificationComposer"]
