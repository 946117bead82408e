"""
Versioning store configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Tunables for version assignment
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge.configs.base import BaseSettings


class StoreSettings(BaseSettings):
    """Document versioning store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    version_assign_retries: int = Field(
        default=3,
        ge=1,
        description="Attempts at assigning a version before a conflict is reported",
    )
