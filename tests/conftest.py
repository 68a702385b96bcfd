"""
Shared fixtures: an in-memory SQLite database, the FastAPI app bound to
it, and account/token helpers.
"""
from typing import Callable, Dict, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from hostel_ops.core.background_tasks import celery_app
from hostel_ops.core.notifications import EmailSender, NotificationDispatcher, OutboundMessage
from hostel_ops.core.security import create_access_token, hash_password
from hostel_ops.db.init_db import drop_db, init_db
from hostel_ops.db.session import build_engine
from hostel_ops.main import create_app
from hostel_ops.models.enums import UserRole
from hostel_ops.models.user import User
from hostel_ops.repositories.user_repository import UserRepository
from hostel_ops.services.permissions import Principal

API = "/api"
DEFAULT_PASSWORD = "secret123"


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(test_engine)
    yield test_engine
    drop_db(test_engine)
    test_engine.dispose()


@pytest.fixture(scope="session", autouse=True)
def eager_tasks():
    # Tasks run inline; nothing talks to a real broker
    celery_app.conf.update(task_always_eager=True, broker_url="memory://")
    yield


@pytest.fixture
def outbox(monkeypatch) -> List[OutboundMessage]:
    """Messages the send_email task would have delivered, in order"""
    sent: List[OutboundMessage] = []
    monkeypatch.setattr(EmailSender, "send", lambda self, message: sent.append(message))
    return sent


@pytest.fixture
def app(engine):
    return create_app(bind=engine, notifications=NotificationDispatcher(enabled=True))


@pytest.fixture
def client(app) -> TestClient:
    # Used without a context manager: startup hooks stay off
    return TestClient(app)


@pytest.fixture
def session_factory(app):
    return app.state.session_factory


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db_session) -> Callable[..., User]:
    counter = {"n": 0}

    def _make_user(role: UserRole, full_name: str = None, email: str = None) -> User:
        counter["n"] += 1
        n = counter["n"]
        user = User(
            full_name=full_name or f"{role.value.title()} {n}",
            email=email or f"{role.value.lower()}{n}@college.edu",
            password_hash=hash_password(DEFAULT_PASSWORD),
            role=role,
        )
        return UserRepository(db_session).create(user, commit=True)

    return _make_user


@pytest.fixture
def student(make_user) -> User:
    return make_user(UserRole.STUDENT, full_name="Asha Student")


@pytest.fixture
def warden(make_user) -> User:
    return make_user(UserRole.WARDEN, full_name="Ravi Warden")


@pytest.fixture
def cleaner(make_user) -> User:
    return make_user(UserRole.CLEANER, full_name="Meena Cleaner")


@pytest.fixture
def electrician(make_user) -> User:
    return make_user(UserRole.ELECTRICIAN, full_name="Vikram Electrician")


@pytest.fixture
def admin(make_user) -> User:
    return make_user(UserRole.ADMIN, full_name="Admin User")


def auth_headers(user: User) -> Dict[str, str]:
    token = create_access_token({"sub": user.id, "email": user.email, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


def principal_for(user: User) -> Principal:
    return Principal.from_user(user)


def file_complaint(client: TestClient, student: User, complaint_type: str = "CLEANER", **overrides) -> dict:
    body = {
        "complaintType": complaint_type,
        "location": "Block A, Room 12",
        "description": "Dust on the floor" if complaint_type == "CLEANER" else "Fan not working",
    }
    body.update(overrides)
    response = client.post(f"{API}/complaints", json=body, headers=auth_headers(student))
    assert response.status_code == 201, response.text
    return response.json()
