from __future__ import annotations

import dataclasses
import smtplib

import pytest

import contracthub.services.email_sender as email_sender
from contracthub.core.config import get_config
from contracthub.core.exceptions import TransportError
from contracthub.services.email_sender import (
    SandboxMailTransport,
    SmtpMailTransport,
    get_mail_transport,
)


class _FakeSMTP:
    instances: list["_FakeSMTP"] = []
    fail_on_send = False

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.login_args = None
        self.messages = []
        _FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, username, password):
        self.login_args = (username, password)

    def send_message(self, message):
        if _FakeSMTP.fail_on_send:
            raise smtplib.SMTPRecipientsRefused({message["To"]: (550, b"no such user")})
        self.messages.append(message)


@pytest.fixture
def fake_smtp(monkeypatch):
    _FakeSMTP.instances = []
    _FakeSMTP.fail_on_send = False
    monkeypatch.setattr(email_sender.smtplib, "SMTP", _FakeSMTP)
    return _FakeSMTP


def _smtp_config(**overrides):
    base = dataclasses.replace(
        get_config(),
        SMTP_SERVER="smtp.example.com",
        SMTP_PORT=2525,
        SMTP_USERNAME="mailer@example.com",
        SMTP_PASSWORD="secret",
        SMTP_FROM_EMAIL="mailer@example.com",
        SMTP_FROM_NAME="Contract Desk",
        SMTP_CC_EMAIL=None,
        SMTP_DEFAULT_TO_EMAIL=None,
        SMTP_USE_TLS=True,
        SMTP_SANDBOX_MODE=False,
    )
    return dataclasses.replace(base, **overrides)


def test_smtp_transport_sends_html_with_tls_and_login(fake_smtp):
    SmtpMailTransport(_smtp_config()).send("acme@example.com", "Hello", "<p>Hi</p>")

    server = fake_smtp.instances[0]
    assert (server.host, server.port) == ("smtp.example.com", 2525)
    assert server.started_tls is True
    assert server.login_args == ("mailer@example.com", "secret")
    message = server.messages[0]
    assert message["To"] == "acme@example.com"
    assert message["From"] == "Contract Desk <mailer@example.com>"
    assert message["X-Priority"] == "1"
    assert message["Cc"] is None
    assert message.get_payload()[0].get_content_subtype() == "html"


def test_smtp_transport_adds_configured_cc(fake_smtp):
    SmtpMailTransport(_smtp_config(SMTP_CC_EMAIL="audit@example.com")).send("acme@example.com", "Hello", "<p/>")

    assert fake_smtp.instances[0].messages[0]["Cc"] == "audit@example.com"


def test_smtp_transport_falls_back_to_default_recipient(fake_smtp):
    SmtpMailTransport(_smtp_config(SMTP_DEFAULT_TO_EMAIL="ops@example.com")).send("", "Hello", "<p/>")

    assert fake_smtp.instances[0].messages[0]["To"] == "ops@example.com"


def test_smtp_transport_without_any_recipient_raises(fake_smtp):
    with pytest.raises(TransportError):
        SmtpMailTransport(_smtp_config()).send("", "Hello", "<p/>")
    assert fake_smtp.instances == []


def test_smtp_transport_without_server_raises(fake_smtp):
    with pytest.raises(TransportError, match="SMTP_SERVER"):
        SmtpMailTransport(_smtp_config(SMTP_SERVER=None)).send("acme@example.com", "Hello", "<p/>")


def test_smtp_errors_are_wrapped(fake_smtp):
    fake_smtp.fail_on_send = True

    with pytest.raises(TransportError) as exc:
        SmtpMailTransport(_smtp_config()).send("acme@example.com", "Hello", "<p/>")
    assert isinstance(exc.value.__cause__, smtplib.SMTPException)


def test_sandbox_transport_records_outbox():
    transport = SandboxMailTransport()
    transport.send("acme@example.com", "Hello", "<p/>", cc="audit@example.com")

    assert transport.outbox[0].to == "acme@example.com"
    assert transport.outbox[0].cc == "audit@example.com"


def test_get_mail_transport_respects_sandbox_flag():
    assert isinstance(get_mail_transport(_smtp_config(SMTP_SANDBOX_MODE=True)), SandboxMailTransport)
    assert isinstance(get_mail_transport(_smtp_config(SMTP_SANDBOX_MODE=False)), SmtpMailTransport)
