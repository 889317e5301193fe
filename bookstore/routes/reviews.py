"""
Bookstore Backend — Review Route Handlers
===========================================

What:  POST /reviews (caller reviews a book) and GET /reviews/{bookId}.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_db_session
from bookstore.exceptions import ValidationError
from bookstore.routes.deps import get_current_user_id
from bookstore.schemas.common import ErrorResponse, MessageResponse, parse_int32
from bookstore.schemas.review import ReviewRequest, ReviewResponse
from bookstore.services.review_service import review_service

router = APIRouter(tags=["Reviews"])


@router.post(
    "/reviews",
    response_model=MessageResponse,
    responses={
        400: {"description": "Bad header or rating out of range", "model": ErrorResponse},
        404: {"description": "Book not found", "model": ErrorResponse},
        409: {"description": "Book already reviewed by this user", "model": ErrorResponse},
    },
    summary="Review a book",
)
async def add_review(
    body: ReviewRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await review_service.add_review(db, user_id, body)
    return MessageResponse(message="Review added successfully")


@router.get(
    "/reviews/{book_id}",
    response_model=List[ReviewResponse],
    responses={400: {"description": "Invalid book ID", "model": ErrorResponse}},
    summary="List the reviews of a book",
)
async def list_reviews(
    book_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[ReviewResponse]:
    # Parsed by hand so a non-numeric or out-of-range id answers "Invalid book ID"
    parsed_id = parse_int32(book_id)
    if parsed_id is None:
        raise ValidationError("Invalid book ID", field="bookId")
    return await review_service.list_reviews(db, parsed_id)
