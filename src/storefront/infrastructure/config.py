"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_")

    data_dir: Path = Path("data")
    storage_backend: Literal["file", "memory", "redis"] = "file"

    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_ttl: int | None = None  # seconds; None keeps state forever

    # False accepts any status change a caller sets
    strict_reservation_transitions: bool = True

    log_level: str = "WARNING"
