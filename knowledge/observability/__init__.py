"""
Observability layer: logging configuration, correlation IDs and HTTP middleware.
"""

from knowledge.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from knowledge.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
