"""Insert a few demo partners. Partners have no API endpoints, so this is the way to get some."""

import logging

from contracthub.core.logging_config import configure_logging
from contracthub.database.db import get_db_session
from contracthub.models import Partner

logger = logging.getLogger(__name__)

DEMO_PARTNERS = [
    ("Acme", "contracts@acme.example"),
    ("Globex", "legal@globex.example"),
    ("Initech", None),
]


def seed_partners() -> int:
    created = 0
    with get_db_session() as db:
        existing = {name for (name,) in db.query(Partner.name).all()}
        for name, email in DEMO_PARTNERS:
            if name in existing:
                continue
            db.add(Partner(name=name, email=email))
            created += 1
        db.commit()
    logger.info("seed.partners.created", extra={"event": "seed.partners.created", "created": created})
    return created


if __name__ == "__main__":
    configure_logging()
    seed_partners()
