"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from contracthub.core.config import Config, get_config
from contracthub.database.db import get_db
from contracthub.services.contract_service import ContractService
from contracthub.services.email_sender import MailTransport
from contracthub.services.email_sender import get_mail_transport as build_mail_transport
from contracthub.services.notification_service import NotificationService


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


def get_mail_transport(settings: Config = Depends(get_settings)) -> MailTransport:
    return build_mail_transport(settings)


def get_contract_service(
    db: Session = Depends(get_db_session),
    transport: MailTransport = Depends(get_mail_transport),
) -> ContractService:
    """Build the request-scoped contract service."""
    return ContractService(db=db, notifier=NotificationService(transport))
