from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from hostel_ops.api.v1.router import router as api_v1_router
from hostel_ops.config.settings import settings
from hostel_ops.core.exceptions import register_exception_handlers
from hostel_ops.core.logging import get_logger, setup_logging
from hostel_ops.core.middleware import register_middlewares
from hostel_ops.core.notifications import NotificationDispatcher
from hostel_ops.db.init_db import ensure_default_admin, init_db
from hostel_ops.db.session import SessionLocal, engine

logger = get_logger(__name__)


def create_app(
    bind: Optional[Engine] = None,
    notifications: Optional[NotificationDispatcher] = None,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under API_PREFIX.
    - Creates tables and the bootstrap admin at startup.

    ``bind`` swaps the configured database engine, e.g. for an in-memory
    SQLite engine in tests.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    db_engine = bind or engine
    if bind is None:
        app.state.session_factory = SessionLocal
    else:
        app.state.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=bind,
        )
    app.state.notifications = notifications or NotificationDispatcher()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register shared core middlewares (request ID, timing, error logging)
    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_PREFIX)

    @app.on_event("startup")
    def on_startup() -> None:
        init_db(db_engine)
        db = app.state.session_factory()
        try:
            ensure_default_admin(db)
        finally:
            db.close()
        logger.info(
            "Application started",
            environment=settings.ENVIRONMENT,
            smtp_configured=settings.smtp_configured,
            notifications_enabled=app.state.notifications.enabled,
        )

    return app


app = create_app()
