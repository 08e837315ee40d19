"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with RDT_) or .env file.

    Examples:
        RDT_THEME_MODE=dark
        RDT_SYSTEM_THEME=dark
        RDT_LOG_LEVEL=DEBUG
        RDT_ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_prefix="RDT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Retail Design Tokens"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = Field(default=False, description="Log at DEBUG regardless of log_level")

    # Logging
    log_level: LogLevel = LogLevel.WARNING
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        validate_default=True,
        description="Log output format: 'json' for production, 'console' for development",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Theme selection
    theme_mode: Literal["light", "dark", "system"] = Field(
        default="system",
        description="Requested theme; 'system' follows system_theme",
    )
    system_theme: Literal["light", "dark"] = Field(
        default="light",
        description="Platform appearance used when theme_mode is 'system'",
    )

    # CSS export
    css_selector_dark: str = Field(
        default='[data-theme="dark"]',
        description="Selector that forces dark tokens in generated CSS",
    )

    @field_validator("theme_mode", "system_theme", mode="before")
    @classmethod
    def normalize_theme(cls, v: str) -> str:
        """Accept theme names in any case."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_format", mode="after")
    @classmethod
    def set_log_format_from_environment(cls, v: str | None, info) -> str:
        """Default to JSON logging in production."""
        if v is None:
            env = info.data.get("environment")
            if env == Environment.PRODUCTION:
                return "json"
        return v or "console"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
