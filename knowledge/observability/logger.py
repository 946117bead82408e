"""
Logger configuration.

Provides configured root logger writing to stdout and, optionally, a log file.

Dependencies: logging (stdlib), knowledge.configs
System role: Centralized logging configuration
"""

import logging
import sys

from knowledge.configs.observability import LoggingSettings


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """
    Configure Python logging with ISO timestamp and source location.

    Args:
        settings: Logging settings (defaults read from the environment)
    """
    settings = settings or LoggingSettings()

    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(settings.format, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.file:
        handlers.append(logging.FileHandler(settings.file, mode="a", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    root_logger.setLevel(settings.level.upper())

    # Reduce noise from verbose third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
