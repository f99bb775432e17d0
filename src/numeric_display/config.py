"""Formatter configuration via environment variables with NUMBER_FORMAT_ prefix."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Numeric display formatter configuration.

    All settings are read from environment variables prefixed with
    ``NUMBER_FORMAT_``. The locale is the one pipes use when they are
    constructed without an explicit locale.
    """

    model_config = SettingsConfigDict(env_prefix="NUMBER_FORMAT_")

    # ── Locale ─────────────────────────────────────────────────────────────
    # BCP-47 ("en-US") or POSIX ("en_US") identifiers are both accepted
    locale: str = "en-US"

    # ── Currency defaults ──────────────────────────────────────────────────
    currency_code: str = Field(default="USD", min_length=3, max_length=3)
    currency_as_symbol: bool = False

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def get_settings() -> Settings:
    return Settings()
