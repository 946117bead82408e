"""
Document API endpoints.

Routes:
- GET /document - Get latest or specific version of a document
- POST /document - Store a new version of a document
- PUT /document - Overwrite an existing version of a document
- DELETE /document - Delete one version or all versions of a document
- GET /documents - List every document stored at a given version

Dependencies: knowledge.application.services, knowledge.models
System role: Document versioning HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from knowledge.api.deps.dependencies import get_document_service
from knowledge.application.services import DocumentService
from knowledge.core.exceptions import DocumentNotFoundError
from knowledge.models.common import ErrorResponse
from knowledge.models.document import ClientDocument, StoreDocumentResponse

from .document_error_handling import handle_document_errors
from .document_validators import (
    parse_client_document,
    parse_optional_int,
    parse_required_int,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["documents"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid parameters or body"},
        500: {"model": ErrorResponse, "description": "Backend failure"},
    },
)


@router.get(
    "/document",
    response_model=ClientDocument,
    responses={404: {"description": "No such document or version"}},
)
@handle_document_errors
async def get_document(
    doc_id: str | None = None,
    doc_version: str | None = None,
    document_service: DocumentService = Depends(get_document_service),
) -> ClientDocument:
    """
    Get one version of a document.

    Args:
        doc_id: Document identifier (required)
        doc_version: Version to fetch, latest when omitted
        document_service: Injected DocumentService

    Returns:
        ClientDocument: Requested document

    Raises:
        HTTPException(400): Missing or non-integer parameter
        HTTPException(404): No matching document
        HTTPException(500): Retrieval failed
    """
    parsed_id = parse_required_int(doc_id, "doc_id")
    parsed_version = parse_optional_int(doc_version, "doc_version")

    doc = await document_service.retrieve_document(parsed_id, parsed_version)
    if doc is None:
        raise DocumentNotFoundError(parsed_id, parsed_version)
    return doc


@router.post("/document", response_model=StoreDocumentResponse)
@handle_document_errors
async def post_document(
    request: Request,
    document_service: DocumentService = Depends(get_document_service),
) -> StoreDocumentResponse:
    """
    Store a new version of a document.

    Args:
        request: Request whose JSON body is a ClientDocument
        document_service: Injected DocumentService

    Returns:
        StoreDocumentResponse: Assigned version

    Raises:
        HTTPException(400): Invalid JSON body
        HTTPException(500): Store failed
    """
    doc = await parse_client_document(request)
    version = await document_service.store_document(doc)
    return StoreDocumentResponse(version=version)


@router.put("/document")
@handle_document_errors
async def put_document(
    request: Request,
    doc_version: str | None = None,
    document_service: DocumentService = Depends(get_document_service),
) -> Response:
    """
    Overwrite an existing version of a document.

    Args:
        request: Request whose JSON body is the replacement ClientDocument
        doc_version: Version to overwrite (required)
        document_service: Injected DocumentService

    Raises:
        HTTPException(400): Missing/non-integer doc_version or invalid JSON body
        HTTPException(500): Update failed
    """
    parsed_version = parse_required_int(doc_version, "doc_version")
    doc = await parse_client_document(request)

    await document_service.update_document(doc, parsed_version)
    return Response(status_code=200)


@router.delete("/document")
@handle_document_errors
async def delete_document(
    doc_id: str | None = None,
    doc_version: str | None = None,
    document_service: DocumentService = Depends(get_document_service),
) -> Response:
    """
    Delete one version, or all versions, of a document.

    Args:
        doc_id: Document identifier (required)
        doc_version: Version to delete, all versions when omitted
        document_service: Injected DocumentService

    Raises:
        HTTPException(400): Missing or non-integer parameter
        HTTPException(500): Delete failed
    """
    parsed_id = parse_required_int(doc_id, "doc_id")
    parsed_version = parse_optional_int(doc_version, "doc_version")

    await document_service.remove_document(parsed_id, parsed_version)
    return Response(status_code=200)


@router.get("/documents", response_model=list[ClientDocument])
@handle_document_errors
async def list_documents(
    doc_version: str | None = None,
    document_service: DocumentService = Depends(get_document_service),
) -> list[ClientDocument]:
    """
    List every document stored at a given version.

    Args:
        doc_version: Version to match across all documents (required)
        document_service: Injected DocumentService

    Returns:
        list[ClientDocument]: Matching documents, possibly empty

    Raises:
        HTTPException(400): Missing or non-integer doc_version
        HTTPException(500): Retrieval failed
    """
    parsed_version = parse_required_int(doc_version, "doc_version")

    docs = await document_service.retrieve_documents(parsed_version)

    logger.info(
        "Documents retrieved",
        extra={"doc_version": parsed_version, "count": len(docs)},
    )
    return docs
