"""Bring the database schema up to date: `python -m contracthub.database.init_db`."""

from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig
from sqlalchemy import inspect

import contracthub.database.db as db_module
from contracthub.core.startup import bootstrap
from contracthub.models import Base

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
BASELINE_REVISION = "20261017_0001"
CORE_TABLES = {"partners", "contracts"}


def build_alembic_config(database_url: str) -> AlembicConfig:
    cfg = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.attributes["url_configured"] = True
    cfg.attributes["skip_logging_config"] = True
    return cfg


def _requires_baseline_stamp() -> bool:
    """Tables created by `create_all` before migrations existed need a stamp, not a create."""
    table_names = set(inspect(db_module.get_engine()).get_table_names())
    return CORE_TABLES.issubset(table_names) and "alembic_version" not in table_names


def init_db() -> None:
    bootstrap()
    active_url = db_module.get_active_database_url()
    alembic_cfg = build_alembic_config(active_url)

    if _requires_baseline_stamp():
        command.stamp(alembic_cfg, BASELINE_REVISION)
        logger.info(
            "database.legacy_schema.stamped",
            extra={"event": "database.legacy_schema.stamped", "revision": BASELINE_REVISION},
        )

    command.upgrade(alembic_cfg, "head")
    Base.metadata.create_all(bind=db_module.get_engine())
    logger.info(
        "database.tables.ready",
        extra={"event": "database.tables.ready", "database_url_scheme": active_url.split("://", 1)[0]},
    )


if __name__ == "__main__":
    init_db()
