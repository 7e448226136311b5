"""ASGI entrypoint: `uvicorn contracthub.main:app`."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from contracthub.api.v1 import get_api_router
from contracthub.core.config import get_config
from contracthub.core.startup import bootstrap
from contracthub.schemas.common import ErrorEnvelope


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    bootstrap()
    yield


def _describe_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Invalid request: " + "; ".join(parts)


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are client errors like any other: 400."""
    envelope = ErrorEnvelope(detail=_describe_errors(exc))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=envelope.model_dump())


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(get_api_router())

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    cfg = get_config()
    uvicorn.run("contracthub.main:app", host=cfg.API_HOST, port=cfg.API_PORT)
