"""Database session management."""
from typing import Any, Dict

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from hostel_ops.config import settings


def _engine_kwargs(database_url: str) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"echo": settings.DATABASE_ECHO, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    return kwargs


def build_engine(database_url: str, **overrides: Any) -> Engine:
    """Create an engine, enabling foreign key enforcement on SQLite."""
    kwargs = _engine_kwargs(database_url)
    kwargs.update(overrides)
    new_engine = create_engine(database_url, **kwargs)

    if database_url.startswith("sqlite"):
        @event.listens_for(new_engine, "connect")
        def _enable_sqlite_fks(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# Create database engine
engine = build_engine(settings.DATABASE_URL)

# Objects stay readable after commit so responses can be built from them
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)

