"""Contract request/response schemas for the API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContractWriteRequest(_CamelModel):
    """Body for create and update.

    Blank titles and unparseable partner lists are rejected by the service with
    a 400, so both fields stay optional at the schema level.
    """

    title: str | None = None
    is_active: bool = False
    # Comma-separated partner IDs, e.g. "1,2,3".
    partner_ids: str | None = None


class ContractResponse(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    is_active: bool
    partner_ids: str
    partner_names: str
