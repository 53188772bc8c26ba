"""
Configuration Management
========================
Settings for the finder UI, loaded from environment variables (prefix PVF_)
or a local .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PVF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Property Value Finder"
    default_key: str = "eid"
    max_input_chars: int = 1_000_000

    # Server
    server_name: Optional[str] = None
    server_port: Optional[int] = None

    # Observability
    log_level: str = "INFO"
    json_logs: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
