"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from user_service.database.databases import user_db


class Settings(BaseSettings):
    """Service settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongodb_uri: str = Field(default="mongodb://localhost:27017")
    users_db_name: str = Field(default=user_db.DB_NAME)
    users_collection: str = Field(default=user_db.Collections.USERS)

    # Connect + index provisioning must finish within this many seconds
    startup_timeout_seconds: float = Field(default=10.0, gt=0)

    # RPC listener
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=50051)

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
