# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fallback secret used when API_KEY is not set. Never rely on it outside local dev.
DEFAULT_API_KEY = "your-secret-api-key"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance, or via
    `app.state.settings` for apps built with `create_app`.
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    ENVIRONMENT: Literal["development", "test", "staging", "production"] = Field(
        default="production",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
        description="Current environment (NODE_ENV is accepted as an alias)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    API_KEY: str = Field(
        default=DEFAULT_API_KEY,
        min_length=1,
        description="Shared secret expected in the x-api-key header for mutations"
    )

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    DEFAULT_PAGE_LIMIT: int = Field(
        default=10,
        ge=1,
        description="Page size used when a listing request gives no limit"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        populate_by_name=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://shop.example.com"
            -> ["http://localhost:3000", "https://shop.example.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def uses_default_api_key(self) -> bool:
        """True when API_KEY was left at the insecure built-in fallback."""
        return self.API_KEY == DEFAULT_API_KEY


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
settings = get_settings()
