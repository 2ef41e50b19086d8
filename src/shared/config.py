"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Catalog
    catalog_path: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        description="YAML file holding the opportunity catalog"
    )

    # Matcher settings
    max_results: int = Field(default=5, ge=0, description="Maximum recommendations returned")

    # Simulated fetch latency
    fetch_delay_seconds: float = Field(default=2.0, ge=0)
    refresh_delay_seconds: float = Field(default=1.5, ge=0)

    # UI
    default_language: Literal["en", "hi"] = Field(default="en")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
