"""Read-only access to partner records."""

from __future__ import annotations

from collections.abc import Iterable

from contracthub.models import Partner
from contracthub.services.base_service import BaseService


class PartnerService(BaseService):
    """Partner store. Partners are managed outside the API, so there are no writes here."""

    def fetch_all(self) -> list[Partner]:
        return self.db.query(Partner).order_by(Partner.id).all()

    def fetch_by_ids(self, ids: Iterable[int]) -> list[Partner]:
        """Return the partners matching `ids`, in the order the ids were given.

        Unknown ids are skipped and repeated ids yield a single partner.
        """
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []
        rows = self.db.query(Partner).filter(Partner.id.in_(wanted)).all()
        by_id = {partner.id: partner for partner in rows}
        return [by_id[partner_id] for partner_id in wanted if partner_id in by_id]
