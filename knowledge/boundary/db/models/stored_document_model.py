"""
Stored document ORM model.

One row per stored revision of a client document.

Dependencies: sqlalchemy, knowledge.boundary.db.base
System role: Versioned document persistence
"""

from sqlalchemy import JSON, BigInteger, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from knowledge.boundary.db.base import Base, SerialIDMixin, TimestampMixin


class StoredDocumentModel(Base, SerialIDMixin, TimestampMixin):
    """
    Stored document ORM model.

    doc_id is duplicated out of the JSON payload so that lookups by
    identifier can use an index. The (doc_id, doc_version) pair is
    unique, which rejects a second writer racing for the same version.

    Attributes:
        id: Serial primary key (insertion order)
        doc_id: Caller-assigned document identifier
        doc_version: Revision number within doc_id, starting at 1
        doc: ClientDocument payload (doc_id, doc_url, elements)
        created_at: Row creation timestamp (UTC)
        updated_at: Last replacement timestamp (UTC)
    """

    __tablename__ = "stored_documents"
    __table_args__ = (
        UniqueConstraint("doc_id", "doc_version", name="uq_stored_documents_doc_id_version"),
    )

    doc_id: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
        doc="Caller-assigned document identifier",
    )

    doc_version: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
        doc="Revision number within doc_id",
    )

    doc: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        doc="ClientDocument payload",
    )
