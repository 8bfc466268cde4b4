"""Configuration management for Gatekeeper.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GATEKEEPER_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Settings
    app_name: str = "Gatekeeper"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    api_prefix: str = "/api/v1"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8080
    workers: int = 1

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./gk_data/gatekeeper.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False

    # Token Settings
    secret_key: str = Field(
        default="",
        description="Secret key for token signing (required)",
    )
    access_token_expire_minutes: int = 60
    token_issuer: str = "gatekeeper"
    token_header: str = "x-access-token"

    # Password Policy
    password_min_length: int = 5
    password_max_length: int = 100

    # Argon2 work factor
    hash_time_cost: int = 3
    hash_memory_cost: int = 65536  # KiB
    hash_parallelism: int = 4

    # Roles
    admin_role_name: str = "ADMIN"
    default_roles: Annotated[list[str], NoDecode] = Field(default=["ADMIN", "CUSTOMER"])

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("default_roles", mode="before")
    @classmethod
    def parse_default_roles(cls, v: str | list[str]) -> list[str]:
        """Parse default roles from comma-separated string or list."""
        if isinstance(v, str):
            return [role.strip() for role in v.split(",") if role.strip()]
        return v

    @model_validator(mode="after")
    def validate_password_bounds(self) -> "Settings":
        """Validate that the password length policy is coherent."""
        if self.password_min_length < 1:
            raise ValueError("password_min_length must be at least 1")
        if self.password_max_length < self.password_min_length:
            raise ValueError(
                "password_max_length must be greater than or equal to password_min_length"
            )
        return self

    @model_validator(mode="after")
    def validate_sqlite_workers(self) -> "Settings":
        """Validate that SQLite is not used with multiple workers."""
        if self.workers > 1 and self.database_url.startswith("sqlite"):
            raise ValueError(
                "SQLite does not support multiple worker processes. "
                f"Requested {self.workers} workers, but SQLite requires workers=1. "
                "Either use --workers 1 or switch to PostgreSQL."
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once at startup and shared by reference.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
