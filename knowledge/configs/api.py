"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: uvicorn bind address and route prefix
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """HTTP transport configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8080, description="Bind port")
    prefix: str = Field(default="", description="Path prefix for all routes, e.g. /api/v1")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")
