"""Contract service: validation, persistence and partner notification."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from contracthub.core.exceptions import NotFoundError, ValidationError
from contracthub.models import Contract, Partner
from contracthub.services.base_service import BaseService
from contracthub.services.notification_service import ContractEvent, NotificationService
from contracthub.services.partner_service import PartnerService
from contracthub.utils.partner_ids import (
    DISPLAY_SEPARATOR,
    PERSISTED_SEPARATOR,
    decode_partner_ids,
    encode_partner_ids,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractView:
    id: int
    title: str
    is_active: bool
    partner_ids: str
    partner_names: str


def _join_names(partners: Sequence[Partner]) -> str:
    return DISPLAY_SEPARATOR.join(partner.name for partner in partners)


class ContractService(BaseService):
    """Contract CRUD for the API.

    Reads are lenient: ids of partners that no longer exist are ignored when
    names are resolved. Writes are strict: every submitted id must resolve.
    """

    def __init__(
        self,
        db: Session,
        notifier: NotificationService,
        partners: PartnerService | None = None,
    ) -> None:
        super().__init__(db)
        self.notifier = notifier
        self.partners = partners or PartnerService(db)

    def _get_or_raise(self, contract_id: int) -> Contract:
        contract = self.db.get(Contract, contract_id)
        if contract is None:
            raise NotFoundError(f"Contract not found: {contract_id}")
        return contract

    def _resolve_partners(self, partner_ids_raw: str | None) -> tuple[list[int], list[Partner]]:
        ids = decode_partner_ids(partner_ids_raw)
        if not ids:
            raise ValidationError("No valid partner IDs provided.")

        partners = self.partners.fetch_by_ids(ids)
        found = {partner.id for partner in partners}
        missing = [partner_id for partner_id in ids if partner_id not in found]
        if missing:
            logger.info(
                "contract.partners_missing",
                extra={"event": "contract.partners_missing", "missing_ids": missing},
            )
            raise ValidationError("One or more selected partners do not exist.")
        return ids, partners

    @staticmethod
    def _require_title(title: str | None) -> str:
        if title is None or not title.strip():
            raise ValidationError("Invalid contract data")
        return title

    def _view(self, contract: Contract, partners: Sequence[Partner]) -> ContractView:
        return ContractView(
            id=contract.id,
            title=contract.title,
            is_active=contract.is_active,
            partner_ids=contract.partner_ids,
            partner_names=_join_names(partners),
        )

    def list_contracts(self) -> list[ContractView]:
        by_id = {partner.id: partner for partner in self.partners.fetch_all()}
        contracts = self.db.query(Contract).order_by(Contract.id).all()

        views = []
        for contract in contracts:
            ids = decode_partner_ids(contract.partner_ids)
            known = [by_id[partner_id] for partner_id in dict.fromkeys(ids) if partner_id in by_id]
            views.append(
                ContractView(
                    id=contract.id,
                    title=contract.title,
                    is_active=contract.is_active,
                    partner_ids=encode_partner_ids(ids, separator=DISPLAY_SEPARATOR),
                    partner_names=_join_names(known),
                )
            )
        return views

    def get_contract(self, contract_id: int) -> ContractView:
        contract = self._get_or_raise(contract_id)
        ids = decode_partner_ids(contract.partner_ids)
        return self._view(contract, self.partners.fetch_by_ids(ids))

    def count_active(self) -> int:
        return self.db.query(Contract).filter(Contract.is_active.is_(True)).count()

    def create_contract(self, title: str | None, is_active: bool, partner_ids_raw: str | None) -> ContractView:
        title = self._require_title(title)
        ids, partners = self._resolve_partners(partner_ids_raw)

        contract = Contract(
            title=title,
            is_active=is_active,
            partner_ids=encode_partner_ids(ids, separator=PERSISTED_SEPARATOR),
        )
        self.db.add(contract)
        self.commit()
        self.db.refresh(contract)
        logger.info("contract.created", extra={"event": "contract.created", "contract_id": contract.id})

        self.notifier.notify_partners(ContractEvent.CREATED, contract.id, contract.title, partners)
        return self._view(contract, partners)

    def update_contract(
        self,
        contract_id: int,
        title: str | None,
        is_active: bool,
        partner_ids_raw: str | None,
    ) -> ContractView:
        contract = self._get_or_raise(contract_id)
        title = self._require_title(title)
        ids, partners = self._resolve_partners(partner_ids_raw)

        contract.title = title
        contract.is_active = is_active
        contract.partner_ids = encode_partner_ids(ids, separator=PERSISTED_SEPARATOR)
        self.commit()
        self.db.refresh(contract)
        logger.info("contract.updated", extra={"event": "contract.updated", "contract_id": contract.id})

        self.notifier.notify_partners(ContractEvent.UPDATED, contract.id, contract.title, partners)
        return self._view(contract, partners)

    def delete_contract(self, contract_id: int) -> None:
        contract = self._get_or_raise(contract_id)
        self.db.delete(contract)
        self.commit()
        logger.info("contract.deleted", extra={"event": "contract.deleted", "contract_id": contract_id})
