"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    PORT: int = _env_int("PORT", 5015)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Document store. Connection credentials are resolved separately
    # (see luckydraw.credentials) so that secrets never sit on the config.
    MONGODB_DB: str = os.getenv("MONGODB_DB", "lucky_draw")
    ORDERS_COLLECTION: str = os.getenv("ORDERS_COLLECTION", "orderNumbers")
    PROBE_COLLECTION: str = os.getenv("PROBE_COLLECTION", "testCollection")

    # "header" | "token" | "open"
    SALES_AUTH_MODE: str = os.getenv("SALES_AUTH_MODE", "header").lower().strip()
    SALES_API_TOKEN: str = os.getenv("SALES_API_TOKEN", "")

    # JSON list of {"id", "label", "weight"}; empty means the built-in table.
    PRIZE_TABLE: str = os.getenv("PRIZE_TABLE", "")

    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    APP_ENV: str = "testing"
    TESTING: bool = True
    DEBUG: bool = False
    MONGODB_DB: str = "lucky_draw_test"
    SALES_AUTH_MODE: str = "header"
    PRIZE_TABLE: str = ""


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig


def cors_origins(raw: str) -> list[str] | str:
    """Split CORS_ORIGINS into a list, keeping a bare "*" as-is."""

    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    if not origins or origins == ["*"]:
        return "*"
    return origins
