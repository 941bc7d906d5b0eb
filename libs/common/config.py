from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_GOPAY_REF_PREFIX


class AppSettings(BaseSettings):
    """Centralised configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=("env.example", ".env"), env_file_encoding="utf-8", extra="ignore")

    app_env: Literal["local", "dev", "prod"] = "local"
    log_level: str = "INFO"

    service_name: str = "GoPay Top-up Simulator"
    service_version: str = "0.1.0"
    port: int = Field(default=8084, ge=1, le=65535)

    # Prepended to every generated reference id
    gopay_ref_prefix: str = Field(default=DEFAULT_GOPAY_REF_PREFIX, min_length=1)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
