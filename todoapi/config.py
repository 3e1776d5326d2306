"""
Configuration management for the Todo Items service.

Settings are loaded from environment variables (or a local .env file),
providing type-safe configuration with validation and defaults.

Design decisions:
- Pydantic Settings for automatic env var loading and validation
- Separate sections for application, storage, server and HTTP concerns
- Properties for computed values (is_development, docs_enabled)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: LOG_FORMAT=json python -m todoapi

    Configuration sections:
    1. Application - Runtime behavior configuration
    2. Storage - In-process database location
    3. Server - HTTP server configuration
    4. HTTP - Transport behavior (HTTPS redirection)
    """

    # ===== Application Settings =====
    app_env: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    log_level: str = Field(
        default="info",
        pattern="^(debug|info|warning|error|critical)$",
        description="Logging level"
    )
    log_format: str = Field(
        default="console",
        pattern="^(json|console)$",
        description="Log output format (json for prod, console for dev)"
    )

    # ===== Storage Configuration =====
    database_url: str = Field(
        default="sqlite://",
        description="SQLAlchemy URL of the process-local store (in-memory SQLite)"
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="127.0.0.1",
        description="Server bind host"
    )
    server_port: int = Field(
        default=8000,
        ge=1024, le=65535,
        description="Server port"
    )

    # ===== HTTP Configuration =====
    https_redirect: bool = Field(
        default=False,
        description="Redirect plain HTTP requests to HTTPS"
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Only SQLite is supported; the store lives inside the process."""
        if not v.startswith("sqlite"):
            raise ValueError("database_url must be a SQLite URL")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def docs_enabled(self) -> bool:
        """OpenAPI documentation is only served in development."""
        return self.is_development

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )


# Singleton instance - loaded once at module import
settings = Settings()
