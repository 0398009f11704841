"""
Configuration management using Pydantic Settings.

This module defines the Settings class that loads configuration from
environment variables and .env files.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="Cat Safe", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root logging level")

    # OpenAI API (for LangChain)
    openai_api_key: str = Field(..., description="OpenAI API key for LLM operations")
    openai_base_url: Optional[str] = Field(
        default=None, description="Custom OpenAI-compatible base URL"
    )
    openai_model: str = Field(default="gpt-4.1-mini", description="Chat model for all agents")
    openai_timeout: float = Field(
        default=60.0, gt=0, description="Timeout for a single LLM request (seconds)"
    )
    openai_max_retries: int = Field(
        default=0, ge=0, description="Retries on transient OpenAI failures"
    )

    # Analysis
    analysis_timeout: float = Field(
        default=180.0, gt=0, description="Timeout for a whole plant analysis (seconds)"
    )

    @field_validator("openai_api_key")
    @classmethod
    def require_api_key(cls, v: str) -> str:
        """Reject an empty or whitespace-only API key."""
        if not v or not v.strip():
            raise ValueError("OPENAI_API_KEY is required but not provided")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Settings: The application settings

    Raises:
        ValidationError: If environment variables are invalid or
            OPENAI_API_KEY is missing
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
