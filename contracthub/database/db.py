"""Engine and session factory bound to DATABASE_URL."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from contracthub.core.config import get_config

logger = logging.getLogger(__name__)


def _build_engine(database_url: str, echo: bool) -> Engine:
    if database_url.startswith("sqlite"):
        # Sessions are handed across FastAPI's threadpool workers.
        return create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(database_url, echo=echo, pool_pre_ping=True, pool_recycle=3600)


engine = _build_engine(get_config().DATABASE_URL, echo=get_config().DEBUG)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_engine() -> Engine:
    return engine


def get_active_database_url() -> str:
    return engine.url.render_as_string(hide_password=False)


def get_db() -> Generator[Session, None, None]:
    """Yield a session for FastAPI dependencies."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Session for scripts that run outside a request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_database_connection() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:  # pragma: no cover - exercised in deployment.
        logger.exception("database.connection_failed", extra={"event": "database.connection_failed"})
        return False
    return True
