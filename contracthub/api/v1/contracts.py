"""Contract endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from contracthub.core.dependencies import get_contract_service
from contracthub.core.exceptions import NotFoundError, ValidationError
from contracthub.schemas.common import ErrorEnvelope
from contracthub.schemas.contracts import ContractResponse, ContractWriteRequest
from contracthub.services.contract_service import ContractService

router = APIRouter(prefix="/contracts", tags=["contracts"])

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("", response_model=list[ContractResponse])
def list_contracts(service: ContractService = Depends(get_contract_service)) -> list[ContractResponse]:
    return [ContractResponse.model_validate(view) for view in service.list_contracts()]


@router.get("/count", response_model=int)
def count_active_contracts(service: ContractService = Depends(get_contract_service)) -> int:
    return service.count_active()


@router.get("/{contract_id}", response_model=ContractResponse, responses=NOT_FOUND)
def get_contract(contract_id: int, service: ContractService = Depends(get_contract_service)) -> ContractResponse:
    try:
        view = service.get_contract(contract_id)
    except NotFoundError as exc:
        raise _http_error(exc) from exc
    return ContractResponse.model_validate(view)


@router.post("/add", response_model=ContractResponse, responses=BAD_REQUEST)
def add_contract(
    payload: ContractWriteRequest,
    service: ContractService = Depends(get_contract_service),
) -> ContractResponse:
    try:
        view = service.create_contract(
            title=payload.title,
            is_active=payload.is_active,
            partner_ids_raw=payload.partner_ids,
        )
    except ValidationError as exc:
        raise _http_error(exc) from exc
    return ContractResponse.model_validate(view)


@router.put("/edit/{contract_id}", response_model=ContractResponse, responses={**BAD_REQUEST, **NOT_FOUND})
def update_contract(
    contract_id: int,
    payload: ContractWriteRequest,
    service: ContractService = Depends(get_contract_service),
) -> ContractResponse:
    try:
        view = service.update_contract(
            contract_id=contract_id,
            title=payload.title,
            is_active=payload.is_active,
            partner_ids_raw=payload.partner_ids,
        )
    except (NotFoundError, ValidationError) as exc:
        raise _http_error(exc) from exc
    return ContractResponse.model_validate(view)


@router.delete("/delete/{contract_id}", responses=NOT_FOUND)
def delete_contract(contract_id: int, service: ContractService = Depends(get_contract_service)) -> Response:
    try:
        service.delete_contract(contract_id)
    except NotFoundError as exc:
        raise _http_error(exc) from exc
    return Response(status_code=status.HTTP_200_OK)
