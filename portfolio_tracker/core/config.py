"""Configuration management using Pydantic v2 settings.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field(default="Portfolio Tracker API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(
        default="development", description="Environment (development, production, test)"
    )

    # Storage
    storage_backend: str = Field(
        default="memory",
        description="Storage backend: 'memory' for the in-process store, 'database' for SQLAlchemy",
    )
    seed_demo_data: bool = Field(
        default=True, description="Seed the in-memory store with demo stocks and a demo portfolio"
    )

    # Database (only used when storage_backend == 'database')
    database_url: str = Field(
        default="sqlite+aiosqlite:///./portfolio_tracker.db",
        description="Async database URL",
    )
    database_echo: bool = Field(default=False, description="Echo SQL statements")

    # API
    api_prefix: str = Field(default="/api", description="API prefix")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )
    rate_limit_create_stock: str = Field(
        default="30/minute", description="Rate limit for stock creation requests"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment.lower() == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()
