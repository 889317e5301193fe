"""
Bookstore Backend — Shared Route Dependencies
===============================================
"""

from typing import Optional

from fastapi import Header, Request

from bookstore.config import Settings
from bookstore.exceptions import ValidationError
from bookstore.schemas.common import parse_int32
from bookstore.services.file_service import FileService


async def get_current_user_id(
    user_id: Optional[str] = Header(
        default=None,
        alias="User-Id",
        description="Numeric id of the calling user (not verified)",
    ),
) -> int:
    """
    Caller identity from the plain User-Id header.

    Any caller can claim any id; this is an identification, not an
    authentication.

    Raises:
        ValidationError: header missing, not an integer or out of the
            32-bit range (→ 400)
    """
    parsed = parse_int32(user_id)
    if parsed is None:
        raise ValidationError("User-Id header is missing or invalid", field="User-Id")
    return parsed


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service
