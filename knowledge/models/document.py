"""
Document domain models and schemas.

Client-visible document payload, the persisted versioned record,
and response schemas for the document API.

Dependencies: pydantic
System role: Document API contracts and stored record shape
"""

from pydantic import BaseModel, Field, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Element(BaseModel):
    """One text element of a document."""

    text: str = ""
    type: str = ""


class ClientDocument(BaseModel):
    """
    Document as supplied and returned by clients.

    Contents are not validated beyond their JSON types: a missing
    doc_url is empty and null elements mean no elements.
    """

    doc_id: int = Field(
        ...,
        strict=True,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Caller-assigned identifier, shared by all versions",
    )
    doc_url: str = Field(default="", description="Source URL of the document")
    elements: list[Element] = Field(default_factory=list, description="Ordered document elements")

    @field_validator("elements", mode="before")
    @classmethod
    def null_elements_to_empty(cls, value):
        return [] if value is None else value


class StoredDocument(BaseModel):
    """
    Persisted revision of a ClientDocument.

    doc_version starts at 1 and increases by one per stored revision
    of the same doc_id. Version 0 is never stored.
    """

    doc_version: int = Field(..., ge=1, le=INT64_MAX, description="Version number within doc_id")
    doc: ClientDocument

    @property
    def doc_id(self) -> int:
        """Identifier of the embedded document."""
        return self.doc.doc_id


class StoreDocumentResponse(BaseModel):
    """Response schema for a stored document."""

    version: int
