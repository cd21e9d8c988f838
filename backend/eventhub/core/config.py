"""
Application configuration using pydantic-settings.
All config is loaded from environment variables (or a local .env file).
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Dev Event Hub API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database. No default: a missing URL is reported on first use.
    DATABASE_URL: Optional[str] = None
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800  # 30 minutes
    DB_AUTO_CREATE_SCHEMA: bool = True

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @property
    def database_url_sync(self) -> Optional[str]:
        """Driver-less URL for Alembic, which runs migrations synchronously."""
        if not self.DATABASE_URL:
            return None
        return (
            self.DATABASE_URL
            .replace("+asyncpg", "")
            .replace("+aiosqlite", "")
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
