"""
Document request validation utilities.

Turns raw query parameters and request bodies into store arguments.
Messages are returned to the client verbatim.

Dependencies: pydantic, knowledge.models.document
System role: Document request parsing
"""

import re

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from knowledge.core.exceptions import ValidationError
from knowledge.models.document import INT64_MAX, INT64_MIN, ClientDocument

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _to_int64(value: str) -> int | None:
    if not _INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def parse_required_int(value: str | None, name: str) -> int:
    """
    Parse a mandatory integer query parameter.

    Args:
        value: Raw parameter value, None or "" when absent
        name: Parameter name used in error messages

    Returns:
        int: Parsed value

    Raises:
        ValidationError: If the parameter is missing or not a 64-bit integer
    """
    if not value:
        raise ValidationError(f"missing {name} parameter", field=name)
    number = _to_int64(value)
    if number is None:
        raise ValidationError(f"{name} parameter must be of type int", field=name)
    return number


def parse_optional_int(value: str | None, name: str, default: int = 0) -> int:
    """
    Parse an optional integer query parameter.

    Args:
        value: Raw parameter value, None or "" when absent
        name: Parameter name used in error messages
        default: Value used when the parameter is absent

    Returns:
        int: Parsed value or default

    Raises:
        ValidationError: If the parameter is present but not a 64-bit integer
    """
    if not value:
        return default
    number = _to_int64(value)
    if number is None:
        raise ValidationError(f"{name} parameter must be of type int or left out", field=name)
    return number


async def parse_client_document(request: Request) -> ClientDocument:
    """
    Decode the request body into a ClientDocument.

    Args:
        request: Incoming request with a JSON body

    Returns:
        ClientDocument: Decoded document

    Raises:
        ValidationError: If the body is not JSON of the ClientDocument shape
    """
    body = await request.body()
    try:
        return ClientDocument.model_validate_json(body)
    except PydanticValidationError as e:
        raise ValidationError("invalid json", details={"errors": e.error_count()}) from e
