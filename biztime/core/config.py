from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Relative SQLite path by default; any SQLAlchemy URL works
    DATABASE_URL: str = "sqlite:///./biztime.db"
    DATABASE_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # "json" in production

    # Earlier releases answered missing fields / bad references with 500.
    # Turn this on to keep that status instead of 400.
    LEGACY_VALIDATION_STATUS: bool = False

    CORS_ORIGINS: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
