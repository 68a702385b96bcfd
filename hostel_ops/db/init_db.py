# hostel_ops/db/init_db.py
"""Database initialization utilities."""
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

# Importing the package registers every model with Base.metadata
from hostel_ops.models import Base, User, UserRole
from hostel_ops.config import settings
from hostel_ops.core.security import hash_password
from hostel_ops.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    """
    Create all tables that do not exist yet.

    Suitable for development and SQLite deployments; schema migrations are
    out of scope for this service.
    """
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


def drop_db(bind: Engine) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Only for development/testing purposes.
    """
    Base.metadata.drop_all(bind=bind)
    logger.warning("All database tables dropped")


def ensure_default_admin(db: Session) -> Optional[User]:
    """
    Create the bootstrap admin account if configured and missing.

    Returns the created user, or None when nothing was created.
    """
    if not settings.bootstrap_admin_configured:
        logger.info("No bootstrap admin configured, skipping")
        return None

    users = UserRepository(db)
    email = settings.BOOTSTRAP_ADMIN_EMAIL.strip().lower()
    if users.find_by_email(email) is not None:
        logger.info("Admin user already exists, skipping creation")
        return None

    admin = User(
        full_name=settings.BOOTSTRAP_ADMIN_NAME,
        email=email,
        password_hash=hash_password(settings.BOOTSTRAP_ADMIN_PASSWORD),
        role=UserRole.ADMIN,
    )
    users.create(admin, commit=True)
    logger.info("Default admin user created: %s", email)
    return admin
