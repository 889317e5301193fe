"""
Bookstore Backend — Shared Schema Base & Generic Responses
============================================================

JSON behaviour shared by every request and response model:

    - Unknown fields in request bodies are ignored
    - Lax-mode coercion accepts e.g. "5" for an int field
    - Fields are camelCase on the wire (imageId, bookTitle) but can also be
      sent in snake_case
    - Default-valued fields are always emitted in responses
"""

import re
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Ids are stored as SQLite INTEGER and exchanged as 32-bit ints by the client
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int32(value: Optional[str]) -> Optional[int]:
    """
    Parse a header or path value as a 32-bit int.

    Returns None for anything else, including values `int()` would accept
    such as "1_000" or " 7", and values outside the 32-bit range.
    """
    if value is None or not _INT_PATTERN.fullmatch(value):
        return None
    parsed = int(value)
    if not INT32_MIN <= parsed <= INT32_MAX:
        return None
    return parsed


class ApiModel(BaseModel):
    """Base class for all API schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class MessageResponse(ApiModel):
    """Plain acknowledgement body, e.g. {"message": "Book purchased successfully"}."""
    message: str


class UploadResponse(ApiModel):
    """Returned by POST /upload."""
    image_url: str = Field(description="Path under which the uploaded image is served")


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Fields:
        error: Machine-readable error code (e.g. "conflict", "not_found")
        message: Human-readable description
        details: Optional extra context
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(ApiModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
