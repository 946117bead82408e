"""
Stored document collection.

Maps StoredDocument records onto the stored_documents table and
decodes rows back into StoredDocument on every read.

Dependencies: sqlalchemy, pydantic, knowledge.boundary.db
System role: Document persistence operations
"""

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

from knowledge.boundary.db.collections.base_collection import BaseCollection, Filter, Sort
from knowledge.boundary.db.models.stored_document_model import StoredDocumentModel
from knowledge.core.exceptions import DocumentDecodeError, VersionConflictError
from knowledge.models.document import StoredDocument

DOCUMENT_FIELDS = ("doc_id", "doc_version")


class DocumentCollection(BaseCollection[StoredDocumentModel]):
    """
    Collection of StoredDocument records.

    Filters and sorts accept doc_id and doc_version. Reads return
    decoded StoredDocument values rather than ORM rows.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        """
        Initialize DocumentCollection over StoredDocumentModel.

        Args:
            engine: Async engine owning the connection pool
        """
        super().__init__(StoredDocumentModel, engine, DOCUMENT_FIELDS)

    @staticmethod
    def _encode(record: StoredDocument) -> dict:
        return {
            "doc_id": record.doc.doc_id,
            "doc_version": record.doc_version,
            "doc": record.doc.model_dump(mode="json"),
        }

    @staticmethod
    def _decode(row: StoredDocumentModel) -> StoredDocument:
        try:
            return StoredDocument.model_validate(
                {"doc_version": row.doc_version, "doc": row.doc}
            )
        except PydanticValidationError as exc:
            raise DocumentDecodeError(
                f"Stored document does not decode: {exc.error_count()} error(s)",
                operation="decode",
                details={"doc_id": row.doc_id, "doc_version": row.doc_version},
            ) from exc

    async def insert(self, record: StoredDocument) -> None:
        """
        Insert a stored document.

        Args:
            record: Document revision to persist

        Raises:
            VersionConflictError: If (doc_id, doc_version) is already stored
            BackendFailureError: On any other database error
        """
        try:
            await self.insert_row(**self._encode(record))
        except IntegrityError as exc:
            raise VersionConflictError(record.doc.doc_id, record.doc_version) from exc

    async def replace_one(self, filter: Filter, record: StoredDocument) -> int:
        """
        Replace the first stored document matching filter in full.

        Args:
            filter: doc_id/doc_version equality filter
            record: Replacement document

        Returns:
            Number of documents matched (0 or 1)

        Raises:
            VersionConflictError: If the replacement collides with another stored version
        """
        try:
            return await self.replace_one_row(filter, **self._encode(record))
        except IntegrityError as exc:
            raise VersionConflictError(record.doc.doc_id, record.doc_version) from exc

    async def find(
        self,
        filter: Filter,
        sort: Sort | None = None,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        """
        Retrieve stored documents matching filter.

        Args:
            filter: doc_id/doc_version equality filter
            sort: (field, direction) pairs, insertion order if omitted
            limit: Maximum number of documents

        Returns:
            Decoded documents in query order

        Raises:
            DocumentDecodeError: If any matching row does not decode
            BackendFailureError: On database errors
        """
        rows = await self.find_rows(filter, sort=sort, limit=limit)
        return [self._decode(row) for row in rows]
