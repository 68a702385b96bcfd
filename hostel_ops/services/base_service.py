"""
Base service class providing common functionality for all services.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.orm import Session

from hostel_ops.core.logging import get_logger
from hostel_ops.core.notifications import NotificationDispatcher, OutboundMessage


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Transaction management utilities
    - Post-commit notification dispatch
    """

    def __init__(self, db_session: Session, notifications: Optional[NotificationDispatcher] = None):
        """
        Initialize base service.

        Args:
            db_session: SQLAlchemy database session
            notifications: Outbound dispatcher; messages are dropped when None
        """
        self.db: Session = db_session
        self.notifications = notifications
        self._logger = get_logger(self.__class__.__name__)

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Context manager for database transactions with automatic rollback.

        Example:
            with self.transaction():
                self.complaints.save(complaint)
                self.tickets.create(ticket)
                # commit on success, rollback on any exception
        """
        try:
            yield self.db
            self._commit()
        except Exception as e:
            self._rollback()
            self._logger.warning("Transaction rolled back", error_type=type(e).__name__, error=str(e))
            raise

    def _commit(self) -> None:
        self.db.commit()
        self._logger.debug("Transaction committed")

    def _rollback(self) -> None:
        """Rollback the current transaction, suppressing rollback errors."""
        try:
            self.db.rollback()
        except Exception as e:
            # Rollback errors must not mask the original error
            self._logger.warning("Rollback failed", error=str(e))

    # -------------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------------

    def _notify(self, messages: List[OutboundMessage]) -> None:
        """Hand messages to the delivery task. Call only after commit."""
        if self.notifications is None:
            self._logger.debug("No notification dispatcher, messages dropped", count=len(messages))
            return
        self.notifications.dispatch_many(messages)
