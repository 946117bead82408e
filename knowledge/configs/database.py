"""
Database configuration settings.

Manages the connection parameters of the document collection backend.
Any SQLAlchemy async URL works; PostgreSQL via asyncpg is the default.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the document collection
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Document collection backend configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy async URL, overrides the individual parts",
    )
    driver: str = Field(default="postgresql+asyncpg", description="SQLAlchemy dialect+driver")
    host: str = Field(default="db", description="Database host")
    port: int = Field(default=5432, description="Database port")
    user: str = Field(default="postgres", description="Database user")
    password: str = Field(default="postgres", description="Database password")
    name: str = Field(default="knowledge", description="Database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    create_schema: bool = Field(
        default=True,
        description="Create the document table on startup if it is missing",
    )

    @property
    def async_database_url(self) -> str:
        """
        Construct async connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        if self.url:
            return self.url
        return (
            f"{self.driver}://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}"
        )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured backend is SQLite (no server-side pool)."""
        return self.async_database_url.startswith("sqlite")
