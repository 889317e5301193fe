"""
Bookstore Backend — Catalog Route Handlers
============================================

What:  GET /books (whole catalog) and GET /api/book/{title} (one book).
"""

import logging
from typing import List
from urllib.parse import unquote_plus

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_db_session
from bookstore.exceptions import ValidationError
from bookstore.schemas.book import BookResponse
from bookstore.schemas.common import ErrorResponse
from bookstore.services.book_service import book_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Books"])


@router.get(
    "/books",
    response_model=List[BookResponse],
    summary="List the whole catalog",
)
async def list_books(db: AsyncSession = Depends(get_db_session)) -> List[BookResponse]:
    return await book_service.list_books(db)


@router.get(
    "/api/book/{title:path}",
    response_model=BookResponse,
    responses={
        400: {"description": "Title missing", "model": ErrorResponse},
        404: {"description": "Book not found", "model": ErrorResponse},
    },
    summary="Get a book by its title",
)
async def get_book(title: str, db: AsyncSession = Depends(get_db_session)) -> BookResponse:
    """
    The client URL-encodes the title (form encoding, spaces as '+'), so the
    already path-decoded value is decoded once more and trimmed. The `path`
    converter keeps titles containing an encoded '/' routable.

    Only an absent title (`/api/book/`) is a 400; one that is blank after
    trimming is looked up like any other and is not found.
    """
    if not title:
        raise ValidationError("Title parameter is missing", field="title")
    return await book_service.get_by_title(db, unquote_plus(title).strip())
