from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from contracthub.core.dependencies import get_db_session, get_mail_transport
from contracthub.core.exceptions import TransportError
from contracthub.main import app
from contracthub.models import Base, Partner
from contracthub.services.email_sender import MailTransport, OutgoingEmail


class RecordingTransport(MailTransport):
    """Collects sent messages; addresses in `fail_for` raise TransportError."""

    def __init__(self) -> None:
        self.sent: list[OutgoingEmail] = []
        self.fail_for: set[str] = set()

    def send(self, to: str, subject: str, html_body: str, cc: str | None = None) -> None:
        if to in self.fail_for:
            raise TransportError(f"relay refused {to}")
        self.sent.append(OutgoingEmail(to=to, subject=subject, html_body=html_body, cc=cc))


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'contracthub_test.db'}",
        connect_args={"check_same_thread": False},
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def partners(session_factory):
    """Acme (1) and Globex (2) with emails, Initech (3) without."""
    session = session_factory()
    try:
        session.add_all(
            [
                Partner(id=1, name="Acme", email="acme@example.com"),
                Partner(id=2, name="Globex", email="globex@example.com"),
                Partner(id=3, name="Initech", email=None),
            ]
        )
        session.commit()
    finally:
        session.close()
    return {1: "Acme", 2: "Globex", 3: "Initech"}


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(session_factory, transport):
    def _get_db_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_session] = _get_db_session
    app.dependency_overrides[get_mail_transport] = lambda: transport
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
