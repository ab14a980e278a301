# 📄 File: findeasily/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of the FindEasily site in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - findeasily.main (application startup)
# - Database connection manager
# - Security, storage and event modules

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="FindEasily", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Property listing marketplace",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="text", description="Log output format (json/text)")
    SITE_URL: str = Field(default="http://localhost:8000", description="Public base URL used in mails")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./findeasily.db",
        description="SQLAlchemy async database URL"
    )
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")
    DB_CREATE_ALL: bool = Field(default=True, description="Create tables on startup")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    SECRET_KEY: str = Field(..., description="Session signing key")
    JWT_SECRET_KEY: str = Field(..., description="JWT secret key")
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        description="JWT access token expiry"
    )
    BCRYPT_ROUNDS: int = Field(default=12, description="BCrypt hash rounds")

    SESSION_COOKIE_NAME: str = Field(default="findeasily_session", description="Session cookie name")
    SESSION_MAX_AGE: int = Field(default=1800, description="Session lifetime (seconds)")

    # CORS Settings
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # RATE LIMITING
    # =========================================================================

    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable rate limiting")
    SIGNUP_RATE_LIMIT: str = Field(default="5/minute", description="Sign-up rate limit")
    LOGIN_RATE_LIMIT: str = Field(default="10/minute", description="Login rate limit")
    PASSWORD_RESET_RATE_LIMIT: str = Field(default="3/hour", description="Forgot-password rate limit")

    # =========================================================================
    # FILE STORAGE
    # =========================================================================

    UPLOAD_DIR: str = Field(default="./uploads", description="Root directory for stored files")
    MAX_UPLOAD_SIZE: int = Field(default=10 * 1024 * 1024, description="Max upload size (bytes)")
    ALLOWED_IMAGE_EXTENSIONS: str = Field(
        default="jpg,jpeg,png,gif,webp",
        description="Comma separated list of accepted image extensions"
    )

    # =========================================================================
    # ACCOUNT & LISTING BEHAVIOUR
    # =========================================================================

    PASSWORD_RESET_TOKEN_EXPIRE_HOURS: int = Field(default=24, description="Reset token lifetime")
    PASSWORD_RESET_REVOKE_ALL_TOKENS: bool = Field(
        default=True,
        description="Delete every outstanding reset token of a user after a reset"
    )
    LISTING_STRICT_VALIDATION: bool = Field(
        default=False,
        description="Reject invalid listing forms instead of saving them"
    )

    # =========================================================================
    # EVENTS
    # =========================================================================

    EVENT_QUEUE_MAX_SIZE: int = Field(default=1000, description="Outbound event queue capacity")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v.lower()

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def allowed_image_extensions(self) -> List[str]:
        return [ext.strip().lower() for ext in self.ALLOWED_IMAGE_EXTENSIONS.split(",") if ext.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
