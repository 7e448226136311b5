"""Pydantic schema package for API payloads."""

from contracthub.schemas.common import ErrorEnvelope, HealthResponse
from contracthub.schemas.contracts import ContractResponse, ContractWriteRequest

__all__ = [
    "ContractResponse",
    "ContractWriteRequest",
    "ErrorEnvelope",
    "HealthResponse",
]
