"""Shared service base for request-scoped SQLAlchemy sessions."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contracthub.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services that operate on a caller-owned session.

    The session's lifetime belongs to whoever opened it (a FastAPI dependency or
    `get_db_session()`); services only commit or roll back.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        """Commit current transaction; roll back and raise DatabaseError on failure."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("database.commit_failed", extra={"event": "database.commit_failed"})
            raise DatabaseError("Failed to persist changes.") from exc
