"""
rest_dispatch.config
────────────────────
Typed settings for the dispatch layer. Reads from .env, then environment
variables prefixed with ``REST_DISPATCH_``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class DispatchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REST_DISPATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Transport ─────────────────────────────────────────────────────────────
    base_uri: str | None = None
    # Absolute origin relative dispatch URLs resolve against
    base_url: str | None = None
    timeout: float = Field(default=30.0, gt=0)
    with_credentials: bool = False

    # ── Scoped UI state ───────────────────────────────────────────────────────
    error_class: str = "error"

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {v!r}")
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> DispatchSettings:
    """Return the cached settings; call _reset_settings() in tests."""
    return DispatchSettings()


def _reset_settings() -> None:
    get_settings.cache_clear()
