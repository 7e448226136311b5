"""Mail transports used for contract notifications."""

from __future__ import annotations

import logging
import smtplib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from contracthub.core.config import Config, get_config
from contracthub.core.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutgoingEmail:
    to: str
    subject: str
    html_body: str
    cc: str | None = None


class MailTransport(ABC):
    """Contract for mail transports."""

    @abstractmethod
    def send(self, to: str, subject: str, html_body: str, cc: str | None = None) -> None:
        """Deliver one HTML message. Raises TransportError when delivery fails."""
        raise NotImplementedError


class SmtpMailTransport(MailTransport):
    """Send HTML email through an SMTP relay with STARTTLS."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or get_config()

    def _resolve_recipient(self, to: str) -> str:
        recipient = (to or "").strip() or self.config.SMTP_DEFAULT_TO_EMAIL
        if not recipient:
            raise TransportError("No recipient address and no SMTP_DEFAULT_TO_EMAIL configured.")
        return recipient

    def build_message(self, to: str, subject: str, html_body: str, cc: str | None = None) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = formataddr((self.config.SMTP_FROM_NAME, self.config.SMTP_FROM_EMAIL))
        message["To"] = to
        copy_to = cc or self.config.SMTP_CC_EMAIL
        if copy_to:
            message["Cc"] = copy_to
        message["X-Priority"] = "1"
        message["Importance"] = "High"
        message.attach(MIMEText(html_body, "html"))
        return message

    def send(self, to: str, subject: str, html_body: str, cc: str | None = None) -> None:
        if not self.config.SMTP_SERVER:
            logger.warning("email.smtp_not_configured", extra={"event": "email.smtp_not_configured"})
            raise TransportError("SMTP_SERVER is not configured.")

        recipient = self._resolve_recipient(to)
        message = self.build_message(recipient, subject, html_body, cc)
        try:
            with smtplib.SMTP(
                self.config.SMTP_SERVER,
                self.config.SMTP_PORT,
                timeout=self.config.SMTP_TIMEOUT_SECONDS,
            ) as server:
                if self.config.SMTP_USE_TLS:
                    server.starttls()
                if self.config.SMTP_USERNAME and self.config.SMTP_PASSWORD:
                    server.login(self.config.SMTP_USERNAME, self.config.SMTP_PASSWORD)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise TransportError(f"Failed to send email to {recipient}: {exc}") from exc

        logger.info("email.sent", extra={"event": "email.sent", "to_email": recipient})


class SandboxMailTransport(MailTransport):
    """Keep messages in memory instead of sending them."""

    def __init__(self) -> None:
        self.outbox: list[OutgoingEmail] = []

    def send(self, to: str, subject: str, html_body: str, cc: str | None = None) -> None:
        self.outbox.append(OutgoingEmail(to=to, subject=subject, html_body=html_body, cc=cc))
        logger.info("email.sandbox.sent", extra={"event": "email.sandbox.sent", "to_email": to})


def get_mail_transport(config: Config | None = None) -> MailTransport:
    cfg = config or get_config()
    if cfg.SMTP_SANDBOX_MODE:
        return SandboxMailTransport()
    return SmtpMailTransport(cfg)
