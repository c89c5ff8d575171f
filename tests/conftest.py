import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

# Ensure predictable environment variables for tests before importing the app.
BASE_DIR = Path(__file__).resolve().parents[1]
TEST_DB_PATH = BASE_DIR / "test.db"

if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB_PATH}")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.pop("SMTP_HOST", None)
os.environ.pop("SEED_ADMIN_EMAIL", None)

import onboarding.main as main  # noqa: E402  (import after env vars are set)
from onboarding.database import Base, SessionLocal, engine  # noqa: E402
from onboarding.services.email_service import get_notification_sender  # noqa: E402
from onboarding.services.user_service import build_user_service  # noqa: E402


class RecordingSender:
    """Notification sender that keeps messages in memory."""

    def __init__(self):
        self.messages = []

    def send(self, to_email: str, subject: str, body: str) -> None:
        self.messages.append(SimpleNamespace(to=to_email, subject=subject, body=body))

    def last(self):
        return self.messages[-1]


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def sender():
    return RecordingSender()


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def service(db, sender):
    return build_user_service(db, sender)


@pytest.fixture()
def client(monkeypatch, sender):
    """Provide a TestClient with startup seeding patched out and mail captured."""
    monkeypatch.setattr(main, "run_seed", lambda: None)
    main.app.dependency_overrides[get_notification_sender] = lambda: sender

    with TestClient(main.app) as test_client:
        yield test_client

    main.app.dependency_overrides.pop(get_notification_sender, None)
