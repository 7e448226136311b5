"""SQLAlchemy model package."""

from contracthub.models.base import Base
from contracthub.models.contract import Contract
from contracthub.models.partner import Partner

__all__ = [
    "Base",
    "Contract",
    "Partner",
]
