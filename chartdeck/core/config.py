"""
Application configuration — Pydantic Settings.

Loads from .env with strict validation. Single source of truth
for all environment-dependent values.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────────
    APP_NAME: str = "ChartDeck"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # ── API server ───────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # ── Logging ──────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # ── Rendering targets ────────────────────────────────────────
    RENDER_TARGETS: List[str] = ["myChart"]
    DEFAULT_TARGET: str = "myChart"

    # ── Chart defaults ───────────────────────────────────────────
    DEFAULT_CHART_KIND: str = "bar"
    PREVIEW_ROW_LIMIT: int = 10
    PALETTE_SEED: Optional[int] = None


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
