"""Runtime settings, read from ``VEHICLESTORE_*`` environment variables or ``.env``."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseSettings):
    app_name: str = "Vehicle Store"
    host: str = "0.0.0.0"
    port: int = 8080

    log_dir: str = "logs"
    seed_file: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="VEHICLESTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
