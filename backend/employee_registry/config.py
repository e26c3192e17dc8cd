"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings come from environment variables or .env (never hardcoded at call sites)
    - get_settings() is cached (lru_cache) — single instance per process
    - request_log_format is one of the known request log formats, read from
      REQUEST_LOG_FORMAT or MORGAN_FORMAT

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for everything: works out-of-the-box with no .env
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RequestLogFormat = Literal["tiny", "short", "dev", "common", "combined"]


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)

    # Request logging — only responses with status >= threshold are logged
    request_log_format: RequestLogFormat = Field(
        "tiny",
        validation_alias=AliasChoices("request_log_format", "morgan_format"),
    )
    skip_code_threshold: int = 400

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("request_log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
