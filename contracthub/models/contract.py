"""Contract model module."""

from __future__ import annotations

from sqlalchemy import Boolean, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from contracthub.models.base import AuditMixin, Base


class Contract(Base, AuditMixin):
    __tablename__ = "contracts"
    __table_args__ = (Index("idx_contracts_is_active", "is_active"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # Comma-joined partner ids, e.g. "1,2,3". Not a foreign key: stale ids survive partner deletes.
    partner_ids: Mapped[str] = mapped_column(Text, default="", nullable=False)
