"""
Observability configuration settings.

Settings for log level, format and optional log file.

Dependencies: pydantic_settings
System role: Logging configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge.configs.base import BaseSettings


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOG_",
        case_sensitive=False,
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    file: str | None = Field(
        default=None,
        description="Append logs to this file in addition to stdout (e.g. app.log)",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        description="logging.Formatter format string",
    )
