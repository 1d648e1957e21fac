"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - PORT selects the listening port (default 3000)
    - get_settings() is cached (lru_cache): single instance per process
    - Every setting has a default; .env file read when present
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.request_body import DEFAULT_MAX_BODY_BYTES


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)

    # Request handling
    max_body_bytes: int = Field(DEFAULT_MAX_BODY_BYTES, gt=0)

    # API
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
