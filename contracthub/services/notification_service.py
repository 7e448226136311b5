"""Partner notifications for contract create/update events."""

from __future__ import annotations

import enum
import html
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from contracthub.models import Partner
from contracthub.services.email_sender import MailTransport

logger = logging.getLogger(__name__)

NO_OTHER_PARTNERS = "No other partners."


class ContractEvent(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"


SUBJECTS = {
    ContractEvent.CREATED: "New Contract Assignment",
    ContractEvent.UPDATED: "Contract Updated",
}


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    html_body: str


@dataclass
class DispatchReport:
    sent: int = 0
    failed: int = 0
    skipped: int = 0


def _other_partners_text(recipient: Partner, partners: Sequence[Partner]) -> str:
    others = [partner.name for partner in partners if partner.id != recipient.id]
    if not others:
        return NO_OTHER_PARTNERS
    return html.escape(", ".join(others))


def build_template(
    event: ContractEvent,
    contract_title: str,
    recipient: Partner,
    partners: Sequence[Partner],
) -> EmailTemplate:
    title = html.escape(contract_title)
    if event is ContractEvent.CREATED:
        headline = f"You have been assigned to the contract: <strong>{title}</strong>."
    else:
        headline = f"The contract <strong>{title}</strong> has been updated."

    lines = [
        f"<p>Dear {html.escape(recipient.name)},</p>",
        f"<p>{headline}</p>",
        f"<p><strong>Other partners:</strong> {_other_partners_text(recipient, partners)}</p>",
        "<p>Thank you.</p>",
    ]
    return EmailTemplate(subject=SUBJECTS[event], html_body="\n".join(lines) + "\n")


class NotificationService:
    """Send one email per partner. Delivery problems are logged and never raised."""

    def __init__(self, transport: MailTransport) -> None:
        self.transport = transport

    def notify_partners(
        self,
        event: ContractEvent,
        contract_id: int,
        contract_title: str,
        partners: Sequence[Partner],
    ) -> DispatchReport:
        report = DispatchReport()
        for partner in partners:
            if not partner.email:
                report.skipped += 1
                continue

            template = build_template(event, contract_title, partner, partners)
            try:
                self.transport.send(partner.email, template.subject, template.html_body)
            except Exception:
                report.failed += 1
                logger.exception(
                    "notification.send_failed",
                    extra={
                        "event": "notification.send_failed",
                        "contract_id": contract_id,
                        "partner_id": partner.id,
                        "to_email": partner.email,
                    },
                )
                continue
            report.sent += 1

        logger.info(
            "notification.dispatched",
            extra={
                "event": "notification.dispatched",
                "contract_event": event.value,
                "contract_id": contract_id,
                "sent": report.sent,
                "failed": report.failed,
                "skipped": report.skipped,
            },
        )
        return report
