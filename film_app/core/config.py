"""
Application configuration — Pydantic Settings.

Loads from .env with strict validation. Single source of truth
for all environment-dependent values.
"""

from functools import lru_cache

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
    APP_NAME: str = "FilmDashboard"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # ── Flask ────────────────────────────────────────────────────
    FLASK_SECRET_KEY: str = ""
    FLASK_PORT: int = 5000

    # ── FastAPI ──────────────────────────────────────────────────
    API_PORT: int = 8000
    API_BASE_URL: str = "http://127.0.0.1:8000"

    # ── Dataset ──────────────────────────────────────────────────
    DATASET_PATH: str = "data/a1-film.csv"

    # ── Chart layout box (pixels, margins included) ──────────────
    CHART_WIDTH: int = 700
    CHART_HEIGHT: int = 400

    # ── Logging ──────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
