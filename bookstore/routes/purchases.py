"""
Bookstore Backend — Purchase Route Handlers
=============================================

What:  POST /purchase and GET /purchased-books, both scoped to the caller
       named by the User-Id header.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_db_session
from bookstore.routes.deps import get_current_user_id
from bookstore.schemas.book import BookResponse, PurchaseRequest
from bookstore.schemas.common import ErrorResponse, MessageResponse
from bookstore.services.purchase_service import purchase_service

router = APIRouter(tags=["Purchases"])


@router.post(
    "/purchase",
    response_model=MessageResponse,
    responses={
        400: {"description": "User-Id header missing or invalid", "model": ErrorResponse},
        404: {"description": "Book not found", "model": ErrorResponse},
        409: {"description": "Book already purchased", "model": ErrorResponse},
    },
    summary="Buy a book",
)
async def purchase_book(
    body: PurchaseRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await purchase_service.purchase(db, user_id, body.book_title)
    return MessageResponse(message="Book purchased successfully")


@router.get(
    "/purchased-books",
    response_model=List[BookResponse],
    responses={400: {"description": "User-Id header missing or invalid", "model": ErrorResponse}},
    summary="List the caller's purchased books",
)
async def list_purchased_books(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> List[BookResponse]:
    return await purchase_service.list_purchased(db, user_id)
