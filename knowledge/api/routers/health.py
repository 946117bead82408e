"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: knowledge.boundary
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from knowledge.api.deps.dependencies import get_document_collection
from knowledge.boundary.db import DocumentCollection
from knowledge.core.exceptions import BackendFailureError
from knowledge.models.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(
    collection: DocumentCollection = Depends(get_document_collection),
):
    """Database health check."""
    try:
        await collection.ping()
    except BackendFailureError as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=HealthResponse(status="unhealthy", message="Database unreachable").model_dump(),
        )
    return HealthResponse(status="healthy", message="Database connection OK")
