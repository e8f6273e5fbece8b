"""Application configuration with validation."""
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring service settings, read from the environment or `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Assessment Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Diagnostics
    LOG_SKIPPED_RESPONSES: bool = Field(
        default=True,
        description="Emit a debug event for every response dropped from aggregation",
    )

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Production runs without debug output."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if self.LOG_FORMAT != "json":
                raise ValueError("LOG_FORMAT must be 'json' in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
