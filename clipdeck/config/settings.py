"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
Every value has a default, so the service starts without a .env file.

Production Mode:
    When app_env="production", additional validations apply:
    - debug must be False
    - cors_allowed_origins cannot be ["*"]
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Upstream search provider (tikwm)
    # -------------------------------------------------------------------------
    tikwm_search_url: str = Field(
        default="https://www.tikwm.com/api/feed/search",
        description="tikwm feed search endpoint",
    )
    upstream_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="Browser-like User-Agent the upstream requires",
    )
    upstream_referer: str = Field(
        default="https://www.tikwm.com/",
        description="Referer header the upstream requires",
    )
    upstream_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Transport timeout for upstream requests",
    )

    # -------------------------------------------------------------------------
    # Search defaults
    # -------------------------------------------------------------------------
    search_default_count: int = Field(
        default=12,
        gt=0,
        description="Page size used by the proxy route when count is omitted",
    )
    search_start_cursor: str = Field(
        default="0",
        description="Provider start cursor used when no cursor is given",
    )
    controller_page_size: int = Field(
        default=18,
        gt=0,
        description="Page size the search controller requests",
    )
    proxy_base_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL of the search proxy used by the controller",
    )

    # -------------------------------------------------------------------------
    # Queue persistence
    # -------------------------------------------------------------------------
    queue_storage_dir: Path = Field(
        default=Path(".clipdeck"),
        description="Directory holding blob store slots",
    )
    queue_slot: str = Field(
        default="tiktok-queue",
        description="Blob store slot holding the serialized queue",
    )

    # -------------------------------------------------------------------------
    # Dashboard
    # -------------------------------------------------------------------------
    default_keyword: str = Field(
        default="القهوة",
        description="Keyword searched when no keyword is given",
    )
    preset_keywords: list[str] = Field(
        default=["القهوة", "قهوة مختصة", "coffee tiktok"],
        description="Quick keyword chips offered by the dashboard",
    )
    locale: Literal["en", "ar"] = Field(
        default="en",
        description="Language of user-facing messages and plan templates",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    api_host: str = Field(default="127.0.0.1", description="Server bind host")
    api_port: int = Field(default=8000, description="Server bind port")

    # -------------------------------------------------------------------------
    # CORS Settings
    # -------------------------------------------------------------------------
    cors_allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins. Use ['*'] for development only.",
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="Allow credentials in CORS requests",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production settings are secure."""
        if self.app_env == "production":
            errors = []

            if self.debug:
                errors.append("debug must be False in production")

            if "*" in self.cors_allowed_origins:
                errors.append("cors_allowed_origins cannot contain '*' in production")

            if errors:
                raise ValueError(
                    f"Production configuration errors: {'; '.join(errors)}"
                )

        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
