"""
Application Settings

Settings are read from environment variables prefixed with LEARNPERSONA_
(or a local .env file) and fall back to development defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


# Default database location (next to the ingest package, like the schema lives)
DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "ingest" / "data" / "learnpersona.db"


class Settings(BaseSettings):
    """Runtime configuration for the LearnPersona service."""

    model_config = SettingsConfigDict(
        env_prefix="LEARNPERSONA_",
        env_file=".env",
        extra="ignore",
    )

    # Database
    database_url: str = f"sqlite:///{DEFAULT_DB_PATH}"
    sql_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Demo data (course catalog + simulated organization for the L&D dashboard)
    seed_demo_data: bool = True
    demo_org_size: int = 40
    demo_seed: int = 42


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
