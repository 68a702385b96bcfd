"""
Background Task Management

Celery application for work that runs off the request thread. Redis is
the default broker; results are not stored.

Run a worker with::

    celery -A hostel_ops.core.background_tasks:celery_app worker
"""

from celery import Celery

from hostel_ops.config import settings
from hostel_ops.core.logging import get_logger

logger = get_logger(__name__)


def create_celery_app() -> Celery:
    """Build the Celery application from Settings"""
    app = Celery(
        "hostel_ops",
        broker=settings.task_broker_url,
        include=["hostel_ops.core.notifications"],
    )

    app.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone="UTC",
        enable_utc=True,
        task_ignore_result=True,
        task_time_limit=settings.TASK_TIMEOUT,
        worker_prefetch_multiplier=1,
        task_acks_late=True,
        task_always_eager=settings.TASK_ALWAYS_EAGER,
        broker_connection_retry_on_startup=True,
    )

    logger.debug(
        "Celery application configured",
        eager=settings.TASK_ALWAYS_EAGER,
    )
    return app


celery_app = create_celery_app()


__all__ = ["celery_app", "create_celery_app"]
