"""
Centralized configuration for the CookShare backend.

All settings are loaded from environment variables with sensible defaults.
Database settings are namespaced with a DB_ prefix (e.g., DB_POOL_SIZE).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "CookShare API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Relational store
    database_url: str = "postgresql+psycopg2://postgres:@127.0.0.1:5432/cookshare"
    db_pool_size: int = Field(default=10, ge=1)
    db_max_overflow: int = Field(default=0, ge=0)
    db_pool_timeout: float = Field(default=30.0, ge=0)  # seconds
    # queue: wait up to db_pool_timeout for a free connection
    # reject: fail immediately when every connection is checked out
    db_pool_overflow: Literal["queue", "reject"] = "queue"
    db_echo: bool = False

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
