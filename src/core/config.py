"""
Core configuration module for the Riko Chat Gateway.

This module provides centralized configuration management using Pydantic Settings.
Configuration is loaded from environment variables with the RIKO_ prefix and from
a local .env file when present. Provider API keys and the listen port also accept
their conventional unprefixed names (OPENAI_API_KEY, GEMINI_API_KEY, PORT).
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.exceptions import ConfigurationError

# 20 MiB, large enough for inline base64 attachments
DEFAULT_MAX_BODY_BYTES = 20 * 1024 * 1024


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All fields use the RIKO_ prefix for environment variables.
    Example: RIKO_BULLET_STYLE=strip
    """

    # =========================================================================
    # Service Configuration
    # =========================================================================
    service_name: str = Field(
        default="Riko Chat API",
        description="Service name reported by the health endpoint",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("RIKO_PORT", "PORT"),
        description="Port the service listens on",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )
    max_body_bytes: int = Field(
        default=DEFAULT_MAX_BODY_BYTES,
        ge=1024,
        description="Maximum accepted request body size in bytes",
    )

    # =========================================================================
    # Provider Selection
    # =========================================================================
    provider: Literal["openai", "gemini"] = Field(
        default="openai",
        description="Upstream LLM provider",
    )

    # =========================================================================
    # Provider API Keys
    # SecretStr masks values in logs/repr, use .get_secret_value() to access
    # =========================================================================
    openai_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("RIKO_OPENAI_API_KEY", "OPENAI_API_KEY"),
        description="OpenAI API key",
    )
    gemini_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("RIKO_GEMINI_API_KEY", "GEMINI_API_KEY"),
        description="Google Gemini API key",
    )
    openai_base_url: str | None = Field(
        default=None,
        description="Optional OpenAI-compatible endpoint URL",
    )

    # =========================================================================
    # Model Defaults
    # =========================================================================
    text_model: str = Field(
        default="gpt-4o-mini",
        description="Model used for text-only conversations",
    )
    vision_model: str = Field(
        default="gpt-4o-mini",
        description="Vision-capable model used when attachments are present",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model used by the Gemini binding",
    )
    max_tokens: int = Field(
        default=1024,
        ge=1,
        description="Maximum tokens for multimodal completions",
    )

    # =========================================================================
    # Response Formatting
    # =========================================================================
    bullet_style: Literal["number", "strip"] = Field(
        default="number",
        description="How bullet lists are rendered: renumbered or stripped",
    )

    model_config = SettingsConfigDict(
        env_prefix="RIKO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # =========================================================================
    # Field Validators
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return level

    # =========================================================================
    # Derived Values
    # =========================================================================
    def get_cors_origins(self) -> list[str]:
        """Parse the comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def require_api_key(self) -> str:
        """
        Return the API key for the configured provider.

        Called once at startup. A missing key is fatal.

        Returns:
            The provider API key.

        Raises:
            ConfigurationError: If the active provider has no API key.
        """
        if self.provider == "gemini":
            key = self.gemini_api_key.get_secret_value()
            env_name = "GEMINI_API_KEY"
        else:
            key = self.openai_api_key.get_secret_value()
            env_name = "OPENAI_API_KEY"

        if not key:
            raise ConfigurationError(f"{env_name} is missing", setting=env_name)
        return key


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses functools.lru_cache to ensure only one Settings instance is created.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
