"""
Application configuration using Pydantic Settings.
All config is loaded from environment variables / .env file.
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache

# Relative file settings are resolved against the package directory, not the CWD
PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "calendar-api"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:4200,http://localhost:4201"  # comma-separated

    # ── Supabase ─────────────────────────────────────────
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""  # anon/public key
    EVENTS_TABLE: str = "calendar_events"

    # ── Config options ───────────────────────────────────
    CONFIG_OPTIONS_FILE: str = "config-options.yml"  # relative to PACKAGE_DIR unless absolute

    # ── Startup ──────────────────────────────────────────
    SEED_SAMPLE_DATA: bool = False  # insert sample events when the table is empty

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance (singleton)."""
    return Settings()
