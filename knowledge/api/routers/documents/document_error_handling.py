"""
Document error handling utilities.

Provides a decorator for consistent error handling across
document endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from knowledge.core.exceptions import DocumentNotFoundError, ValidationError
from knowledge.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_MESSAGE = "internal server error. please contact the api provider"


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the {"error": message} body used by every failing endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})


def handle_document_errors(func: F) -> F:
    """
    Decorator to turn document errors into JSON error responses.

    This centralizes:
    - Logging of errors with context (doc_id, doc_version)
    - Mapping specific exceptions to HTTP status codes
    - Hiding internal error details from clients
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ValidationError as e:
            log_with_context(
                logger,
                logging.WARNING,
                "Invalid document request",
                error=e.message,
                endpoint=func.__name__,
            )
            return error_response(e.message, status.HTTP_400_BAD_REQUEST)

        except DocumentNotFoundError as e:
            log_with_context(
                logger,
                logging.INFO,
                "Document not found",
                doc_id=e.doc_id,
                doc_version=e.doc_version,
            )
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={})

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure in document operation",
                e,
                endpoint=func.__name__,
            )
            return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return wrapper  # type: ignore
