"""
Dashboard schemas.
"""

from hostel_ops.schemas.common import BaseResponseSchema

__all__ = ["DashboardStats"]


class DashboardStats(BaseResponseSchema):
    """Aggregate complaint and ticket counts."""

    total_complaints: int = 0
    pending_complaints: int = 0
    completed_complaints: int = 0
    open_tickets: int = 0
    resolved_tickets: int = 0
