"""Application services: use case orchestration."""

from knowledge.application.services.document_service import (
    ALL_VERSIONS,
    LATEST_VERSION,
    DocumentService,
)

__all__ = ["ALL_VERSIONS", "LATEST_VERSION", "DocumentService"]
