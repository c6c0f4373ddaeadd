"""IVA Calculator backend — configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./ivacalc.db"

    # Timezone used to stamp createdAt
    TIMEZONE: str = "UTC"

    # CORS
    FRONTEND_URL: str = "http://localhost:3001"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
