"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "Onboarding Gateway"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # Incode omni API
    api_key: str = ""
    api_url: str = "https://demo-api.incodesmile.com"
    api_version: str = "1.0"
    flow_id: str = ""  # configurationId sent on /omni/start
    client_id: str = ""
    admin_token: str = ""  # only used for onboarding status lookups

    # Session defaults
    session_country_code: str = "ALL"
    session_language: str = "en-US"

    upstream_timeout_seconds: float = 30.0

    # CORS - stored as comma-separated string in env
    cors_origins_str: str = Field(
        default="*",
        validation_alias="cors_origins"
    )

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
