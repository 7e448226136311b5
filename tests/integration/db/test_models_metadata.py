from __future__ import annotations

from sqlalchemy import inspect

from contracthub.models import Base


def test_model_metadata_contains_tables():
    assert {"partners", "contracts"}.issubset(set(Base.metadata.tables.keys()))


def test_create_all_builds_expected_columns(session_factory):
    engine = session_factory.kw["bind"]
    inspector = inspect(engine)

    contract_columns = {column["name"] for column in inspector.get_columns("contracts")}
    partner_columns = {column["name"] for column in inspector.get_columns("partners")}

    assert {"id", "title", "is_active", "partner_ids", "created_at", "updated_at"} <= contract_columns
    assert {"id", "name", "email"} <= partner_columns
