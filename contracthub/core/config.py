"""Configuration module for the ContractHub application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from contracthub.core.exceptions import ConfigurationError

load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_optional(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    DB_CONNECTIVITY_REQUIRED: bool
    SMTP_SERVER: str | None
    SMTP_PORT: int
    SMTP_USERNAME: str | None
    SMTP_PASSWORD: str | None
    SMTP_FROM_EMAIL: str
    SMTP_FROM_NAME: str
    SMTP_CC_EMAIL: str | None
    SMTP_DEFAULT_TO_EMAIL: str | None
    SMTP_USE_TLS: bool
    SMTP_TIMEOUT_SECONDS: int
    SMTP_SANDBOX_MODE: bool
    API_HOST: str
    API_PORT: int
    API_PREFIX: str
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=False)
    smtp_username = _as_optional(os.getenv("SMTP_USERNAME"))

    config = Config(
        APP_NAME=os.getenv("APP_NAME", "ContractHub"),
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./contracthub.db"),
        DB_CONNECTIVITY_REQUIRED=_as_bool(
            os.getenv("DB_CONNECTIVITY_REQUIRED"), default=(resolved_env == "production")
        ),
        SMTP_SERVER=_as_optional(os.getenv("SMTP_SERVER")),
        SMTP_PORT=int(os.getenv("SMTP_PORT", "587")),
        SMTP_USERNAME=smtp_username,
        SMTP_PASSWORD=_as_optional(os.getenv("SMTP_PASSWORD")),
        SMTP_FROM_EMAIL=os.getenv("SMTP_FROM_EMAIL", smtp_username or "noreply@contracthub.local"),
        SMTP_FROM_NAME=os.getenv("SMTP_FROM_NAME", "Contract Notifications"),
        SMTP_CC_EMAIL=_as_optional(os.getenv("SMTP_CC_EMAIL")),
        SMTP_DEFAULT_TO_EMAIL=_as_optional(os.getenv("SMTP_DEFAULT_TO_EMAIL")),
        SMTP_USE_TLS=_as_bool(os.getenv("SMTP_USE_TLS"), default=True),
        SMTP_TIMEOUT_SECONDS=int(os.getenv("SMTP_TIMEOUT_SECONDS", "30")),
        SMTP_SANDBOX_MODE=_as_bool(
            os.getenv("SMTP_SANDBOX_MODE"), default=(resolved_env != "production")
        ),
        API_HOST=os.getenv("API_HOST", "0.0.0.0"),
        API_PORT=int(os.getenv("API_PORT", "8000")),
        API_PREFIX=os.getenv("API_PREFIX", "/api").rstrip("/"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "postgresql", "postgresql+psycopg2"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)

    if not 1 <= config.SMTP_PORT <= 65535:
        raise ConfigurationError("SMTP_PORT must be between 1 and 65535.")
    if config.SMTP_TIMEOUT_SECONDS < 1:
        raise ConfigurationError("SMTP_TIMEOUT_SECONDS must be >= 1.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.is_production and not config.SMTP_SANDBOX_MODE and not config.SMTP_SERVER:
        raise ConfigurationError("Production mail delivery requires SMTP_SERVER.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
