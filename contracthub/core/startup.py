"""Process bootstrap: logging, then a database reachability check."""

from __future__ import annotations

import logging

from contracthub.core.config import get_config
from contracthub.core.logging_config import configure_logging
from contracthub.database.db import get_active_database_url, verify_database_connection

logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    config = get_config()
    if not verify_database_connection():
        if config.DB_CONNECTIVITY_REQUIRED:
            raise RuntimeError("Database connectivity check failed.")
        logger.warning("startup.database.unreachable", extra={"event": "startup.database.unreachable"})

    mail_mode = "sandbox" if config.SMTP_SANDBOX_MODE else "smtp"
    if mail_mode == "smtp" and not config.SMTP_SERVER:
        logger.warning("startup.mail.smtp_unconfigured", extra={"event": "startup.mail.smtp_unconfigured"})

    logger.info(
        "startup.ready",
        extra={
            "event": "startup.ready",
            "env": config.ENV,
            "database_scheme": get_active_database_url().split("://", 1)[0],
            "mail_mode": mail_mode,
        },
    )


def bootstrap() -> None:
    configure_logging()
    validate_startup_config()
