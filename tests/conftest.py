"""
Pytest configuration shared by all tests.

Environment variables are set before any application import because
``cats_api.core.config`` builds its settings at import time.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import AsyncIterator, Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from cats_api.domain.ai.ports import TextGenerator
from cats_api.domain.auth.entities import ADMIN_ROLE, AuthenticatedUser
from cats_api.domain.email.ports import EmailSender
from cats_api.infrastructure.auth.captcha_store import InMemoryCaptchaStore
from cats_api.infrastructure.db.models import Base
from cats_api.infrastructure.db.seed import seed_cats, seed_roles
from cats_api.infrastructure.db.session import SessionLocal, engine
from cats_api.interfaces.ai.dependencies import get_text_generator
from cats_api.interfaces.auth.dependencies import (
    get_captcha_store,
    get_current_user,
    get_email_sender,
)
from cats_api.main import app


class RecordingEmailSender(EmailSender):
    """Keeps sent messages instead of talking to an SMTP server."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    def send(self, to: str, subject: str, body: str) -> None:
        self.sent.append((to, subject, body))


class FakeTextGenerator(TextGenerator):
    """Echoes prompts back. Streams a fixed reply in chunks.

    Setting ``error`` fails completions, and streams after the last chunk.
    """

    def __init__(self, chunks: tuple[str, ...] = ("Hel", "", "lo")) -> None:
        self.prompts: list[str] = []
        self.chunks = chunks
        self.error: Exception | None = None

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return f"echo: {prompt}"

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        self.prompts.append(prompt)
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def database() -> Iterator[None]:
    """Fresh in-memory schema for every test."""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture(autouse=True)
def clear_overrides() -> Iterator[None]:
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def session() -> Iterator[Session]:
    with SessionLocal() as db:
        yield db


@pytest.fixture
def roles(session: Session) -> None:
    seed_roles(session)
    session.commit()


@pytest.fixture
def seeded_cats(session: Session) -> None:
    seed_cats(session)
    session.commit()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def login_as() -> Callable[..., AuthenticatedUser]:
    """Make every request run as a user holding the given roles."""

    def _login(*roles: str) -> AuthenticatedUser:
        user = AuthenticatedUser(
            id=1, email="tester@example.com", username="tester", roles=tuple(roles)
        )
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _login


@pytest.fixture
def admin(login_as) -> AuthenticatedUser:
    return login_as(ADMIN_ROLE)


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    sender = RecordingEmailSender()
    app.dependency_overrides[get_email_sender] = lambda: sender
    return sender


@pytest.fixture
def captcha_store() -> InMemoryCaptchaStore:
    store = InMemoryCaptchaStore()
    app.dependency_overrides[get_captcha_store] = lambda: store
    return store


@pytest.fixture
def text_generator() -> FakeTextGenerator:
    generator = FakeTextGenerator()
    app.dependency_overrides[get_text_generator] = lambda: generator
    return generator
