"""Root API router."""

from __future__ import annotations

from fastapi import APIRouter

from contracthub.api.v1 import contracts, health
from contracthub.core.config import get_config


def get_api_router() -> APIRouter:
    api_router = APIRouter(prefix=get_config().API_PREFIX)
    api_router.include_router(health.router)
    api_router.include_router(contracts.router)
    return api_router
