"""
Complaint status machine and ticket numbering.
"""

import re
import uuid
from datetime import date
from typing import Dict, FrozenSet, Optional

from hostel_ops.core.constants import (
    TICKET_NUMBER_DATE_FORMAT,
    TICKET_NUMBER_PATTERN,
    TICKET_NUMBER_PREFIX,
    TICKET_NUMBER_SUFFIX_LENGTH,
)
from hostel_ops.models.complaint import Complaint
from hostel_ops.models.enums import ComplaintStatus
from hostel_ops.models.base import utcnow
from hostel_ops.services.errors import InvalidStateError

# Valid status transitions
VALID_STATUS_TRANSITIONS: Dict[ComplaintStatus, FrozenSet[ComplaintStatus]] = {
    ComplaintStatus.SUBMITTED: frozenset({
        ComplaintStatus.ASSIGNED,
        ComplaintStatus.IN_PROGRESS,
        ComplaintStatus.REJECTED,
    }),
    ComplaintStatus.ASSIGNED: frozenset({
        ComplaintStatus.IN_PROGRESS,
        ComplaintStatus.TICKET_GENERATED,
        ComplaintStatus.COMPLETED,
        ComplaintStatus.REJECTED,
    }),
    ComplaintStatus.IN_PROGRESS: frozenset({
        ComplaintStatus.TICKET_GENERATED,
        ComplaintStatus.COMPLETED,
        ComplaintStatus.REJECTED,
    }),
    ComplaintStatus.TICKET_GENERATED: frozenset({
        ComplaintStatus.COMPLETED,
        ComplaintStatus.REJECTED,
    }),
    ComplaintStatus.COMPLETED: frozenset(),  # Terminal state
    ComplaintStatus.REJECTED: frozenset(),  # Terminal state
}

_TICKET_NUMBER_RE = re.compile(TICKET_NUMBER_PATTERN)


def can_transition(current: ComplaintStatus, target: ComplaintStatus) -> bool:
    return target in VALID_STATUS_TRANSITIONS.get(current, frozenset())


def is_terminal(status: ComplaintStatus) -> bool:
    return not VALID_STATUS_TRANSITIONS.get(status)


def ensure_transition(complaint: Complaint, target: ComplaintStatus) -> None:
    """
    Validate moving ``complaint`` to ``target``.

    Raises:
        InvalidStateError: If the transition is not allowed
    """
    if not can_transition(complaint.status, target):
        raise InvalidStateError(
            f"Cannot move complaint from {complaint.status.value} to {target.value}",
            current_state=complaint.status.value,
            details={"target_state": target.value},
        )


def generate_ticket_number(today: Optional[date] = None) -> str:
    """
    Generate a ticket number: ``TKT-<YYYYMMDD>-<8 hex chars>``.

    The suffix comes from a random UUID4; callers still check uniqueness
    against storage before use.
    """
    day = today or utcnow().date()
    suffix = uuid.uuid4().hex[:TICKET_NUMBER_SUFFIX_LENGTH]
    return f"{TICKET_NUMBER_PREFIX}-{day.strftime(TICKET_NUMBER_DATE_FORMAT)}-{suffix}"


def is_valid_ticket_number(value: str) -> bool:
    return bool(_TICKET_NUMBER_RE.match(value))


__all__ = [
    "VALID_STATUS_TRANSITIONS",
    "can_transition",
    "is_terminal",
    "ensure_transition",
    "generate_ticket_number",
    "is_valid_ticket_number",
]
