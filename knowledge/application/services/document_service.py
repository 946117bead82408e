"""
Document versioning service.

Stores every revision of a client document as a separate, numbered
version and answers reads for the latest or a specific version.

Dependencies: knowledge.boundary.db.collections, knowledge.models
System role: Document versioning use case orchestration
"""

import asyncio
import logging
import weakref

from knowledge.boundary.db.collections import DESCENDING, DocumentCollection
from knowledge.core.exceptions import BackendFailureError, VersionConflictError
from knowledge.models.document import ClientDocument, StoredDocument

logger = logging.getLogger(__name__)

LATEST_VERSION = 0
ALL_VERSIONS = 0


class DocumentService:
    """
    Versioning store over a document collection.

    A doc_version of 0 means "latest" for reads and "all versions"
    for deletes; it is never stored.

    Version assignment holds a per-doc_id lock for the whole
    read-latest-then-insert sequence. Writers in other processes are
    caught by the collection's unique (doc_id, doc_version) constraint
    and the assignment is retried.
    """

    def __init__(
        self,
        collection: DocumentCollection,
        version_assign_retries: int = 3,
    ) -> None:
        """
        Initialize document service.

        Args:
            collection: Document collection, shared by every call
            version_assign_retries: Insert attempts before a version conflict is raised
        """
        self.collection = collection
        self.version_assign_retries = version_assign_retries
        self._locks: weakref.WeakValueDictionary[int, asyncio.Lock] = weakref.WeakValueDictionary()

    def _lock_for(self, doc_id: int) -> asyncio.Lock:
        lock = self._locks.get(doc_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[doc_id] = lock
        return lock

    async def _find_one(self, doc_id: int, doc_version: int) -> StoredDocument | None:
        if doc_version == LATEST_VERSION:
            docs = await self.collection.find(
                {"doc_id": doc_id},
                sort=[("doc_version", DESCENDING)],
                limit=1,
            )
        else:
            docs = await self.collection.find(
                {"doc_id": doc_id, "doc_version": doc_version},
                limit=1,
            )
        return docs[0] if docs else None

    async def retrieve_document(
        self,
        doc_id: int,
        doc_version: int = LATEST_VERSION,
    ) -> ClientDocument | None:
        """
        Get one version of a document.

        Args:
            doc_id: Document identifier
            doc_version: Exact version, or 0 for the latest

        Returns:
            ClientDocument | None: The document, None if no version matches

        Raises:
            BackendFailureError: If the collection fails
        """
        try:
            stored = await self._find_one(doc_id, doc_version)
        except BackendFailureError as e:
            logger.error(
                "Failed to retrieve document",
                extra={"error": str(e), "doc_id": doc_id, "doc_version": doc_version},
            )
            raise

        return stored.doc if stored else None

    async def store_document(self, client_doc: ClientDocument) -> int:
        """
        Store a new version of a document.

        The first version of a doc_id is 1; each later one is the
        current latest plus one.

        Args:
            client_doc: Document payload carrying its doc_id

        Returns:
            int: The assigned version

        Raises:
            VersionConflictError: If every attempt lost the version to another writer
            BackendFailureError: If the collection fails
        """
        doc_id = client_doc.doc_id
        attempt = 0
        async with self._lock_for(doc_id):
            while True:
                attempt += 1
                try:
                    latest = await self._find_one(doc_id, LATEST_VERSION)
                    version = latest.doc_version + 1 if latest else 1
                    await self.collection.insert(
                        StoredDocument(doc_version=version, doc=client_doc)
                    )
                except VersionConflictError as e:
                    if attempt >= self.version_assign_retries:
                        logger.error(
                            "Failed to assign document version",
                            extra={"error": str(e), "doc_id": doc_id, "attempts": attempt},
                        )
                        raise
                    logger.warning(
                        "Document version taken by another writer, retrying",
                        extra={"doc_id": doc_id, "doc_version": e.doc_version, "attempt": attempt},
                    )
                    continue
                except BackendFailureError as e:
                    logger.error(
                        "Failed to store document",
                        extra={"error": str(e), "doc_id": doc_id},
                    )
                    raise

                logger.info(
                    "Document stored",
                    extra={"doc_id": doc_id, "doc_version": version},
                )
                return version

    async def update_document(self, client_doc: ClientDocument, doc_version: int) -> None:
        """
        Overwrite an existing version of a document in full.

        This is the one path that mutates a stored revision. Replacing a
        version that does not exist is not reported to the caller.

        Args:
            client_doc: Replacement payload; its doc_id selects the document
            doc_version: Version to replace

        Raises:
            BackendFailureError: If the collection fails
        """
        doc_id = client_doc.doc_id
        # Unvalidated so an out-of-range version reaches the filter and matches nothing
        try:
            matched = await self.collection.replace_one(
                {"doc_id": doc_id, "doc_version": doc_version},
                StoredDocument.model_construct(doc_version=doc_version, doc=client_doc),
            )
        except BackendFailureError as e:
            logger.error(
                "Failed to update document",
                extra={"error": str(e), "doc_id": doc_id, "doc_version": doc_version},
            )
            raise

        if not matched:
            logger.warning(
                "Update matched no stored document",
                extra={"doc_id": doc_id, "doc_version": doc_version},
            )

    async def remove_document(self, doc_id: int, doc_version: int = ALL_VERSIONS) -> None:
        """
        Delete one version, or every version, of a document.

        Deleting something that is not stored is not an error.

        Args:
            doc_id: Document identifier
            doc_version: Exact version, or 0 for all versions

        Raises:
            BackendFailureError: If the collection fails
        """
        try:
            if doc_version == ALL_VERSIONS:
                deleted = await self.collection.delete_many({"doc_id": doc_id})
            else:
                deleted = await self.collection.delete_one(
                    {"doc_id": doc_id, "doc_version": doc_version}
                )
        except BackendFailureError as e:
            logger.error(
                "Failed to remove document",
                extra={"error": str(e), "doc_id": doc_id, "doc_version": doc_version},
            )
            raise

        logger.info(
            "Document removed",
            extra={"doc_id": doc_id, "doc_version": doc_version, "deleted": deleted},
        )

    async def retrieve_documents(self, doc_version: int) -> list[ClientDocument]:
        """
        Get every document that has the given version, across all doc_ids.

        Args:
            doc_version: Exact version to match

        Returns:
            list[ClientDocument]: Matching documents in collection order, possibly empty

        Raises:
            DocumentDecodeError: If any matching record does not decode;
                no partial result is returned
            BackendFailureError: If the collection fails
        """
        try:
            stored = await self.collection.find({"doc_version": doc_version})
        except BackendFailureError as e:
            logger.error(
                "Failed to retrieve documents",
                extra={"error": str(e), "doc_version": doc_version},
            )
            raise

        return [doc.doc for doc in stored]
