"""Configuration management for taskr."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TASKR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    service_name: str = Field(default="taskr", description="Service name reported to Logfire")
    environment: str = Field(default="development", description="Deployment environment label")

    # Storage Configuration
    repository_backend: Literal["memory"] = Field(
        default="memory",
        description="Task repository backend (only the in-memory backend ships with taskr)",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
