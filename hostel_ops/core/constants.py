# hostel_ops/core/constants.py
"""
Core application constants.

Centralizes literals shared across layers: header names, the ticket number
format and token claims.
"""

from __future__ import annotations

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"

# Ticket numbers look like TKT-20240131-1a2b3c4d
TICKET_NUMBER_PREFIX: str = "TKT"
TICKET_NUMBER_DATE_FORMAT: str = "%Y%m%d"
TICKET_NUMBER_SUFFIX_LENGTH: int = 8
TICKET_NUMBER_PATTERN: str = r"^TKT-\d{8}-[0-9a-f]{8}$"
TICKET_NUMBER_MAX_ATTEMPTS: int = 5

# Token claims
TOKEN_TYPE_ACCESS: str = "access"

# Celery task names
TASK_SEND_EMAIL: str = "hostel_ops.notifications.send_email"
