"""
Exception hierarchy for the knowledge document store.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class KnowledgeException(Exception):
    """Base exception for all knowledge store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(KnowledgeException):
    """Raised when request input cannot be turned into store arguments."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message, returned to the client as-is
            field: Parameter that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentNotFoundError(KnowledgeException):
    """Raised when a read matches no stored document."""

    def __init__(
        self,
        doc_id: int,
        doc_version: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document not found error.

        Args:
            doc_id: Requested document identifier
            doc_version: Requested version (0 means latest)
            details: Additional context
        """
        details = details or {}
        details["doc_id"] = doc_id
        details["doc_version"] = doc_version
        self.doc_id = doc_id
        self.doc_version = doc_version
        super().__init__(f"Document not found: {doc_id}", details)


class BackendFailureError(KnowledgeException):
    """Raised when the document collection backend fails an operation."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize backend failure.

        Args:
            message: Error message
            operation: Collection operation that failed (insert, find, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)


class DocumentDecodeError(BackendFailureError):
    """Raised when a stored record does not decode into a StoredDocument."""

    pass


class VersionConflictError(BackendFailureError):
    """Raised when a (doc_id, doc_version) pair is already taken."""

    def __init__(
        self,
        doc_id: int,
        doc_version: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize version conflict.

        Args:
            doc_id: Document identifier
            doc_version: Version that was already stored
            details: Additional context
        """
        details = details or {}
        details["doc_id"] = doc_id
        details["doc_version"] = doc_version
        self.doc_id = doc_id
        self.doc_version = doc_version
        super().__init__(
            f"Version {doc_version} of document {doc_id} already exists",
            operation="insert",
            details=details,
        )
