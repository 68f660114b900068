"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Muscle Heatmap Engine"
    VERSION: str = "0.1.0"
    PROJECT_URL: str = "https://github.com/muscle-heatmap/muscle-heatmap"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Heatmap defaults (used when a request leaves them out)
    DEFAULT_NORMALIZATION: Literal["relative", "fixed"] = "relative"
    FIXED_CEILING: float = Field(10000.0, gt=0.0)
    ON_MISSING_EXERCISE: Literal["skip", "abort"] = "skip"
    WEEK_STARTS_ON: int = Field(0, ge=0, le=6)

    # Workout session drafts
    SESSION_DRAFT_MAX_AGE_HOURS: float = Field(4.0, gt=0.0)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
