"""
Bookstore Backend — Purchase Service
======================================

What:  Records purchases and lists the books a user has bought.
Who:   Called by POST /purchase and GET /purchased-books.

Purchase flow (one transaction):
    1. Book with this exact title must exist          → 404 otherwise
    2. No (user_id, book_title) row may exist yet      → 409 otherwise
    3. Insert the purchase

Steps 2 and 3 are a check-then-insert without a unique constraint:
concurrent identical purchases can both be recorded. Sequential duplicates
are always rejected.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.exceptions import ConflictError, DatabaseError, NotFoundError
from bookstore.models import BookCard, PurchasedBook
from bookstore.schemas.book import BookResponse
from bookstore.services.book_service import book_service

logger = logging.getLogger(__name__)


class PurchaseService:

    async def purchase(self, db: AsyncSession, user_id: int, book_title: str) -> None:
        """
        Raises:
            NotFoundError: no book with this title (→ 404)
            ConflictError: the user already owns this title (→ 409)
        """
        if await book_service.find_by_title(db, book_title) is None:
            raise NotFoundError(resource="book", resource_id=book_title)

        result = await db.execute(
            select(PurchasedBook.id)
            .where(PurchasedBook.user_id == user_id)
            .where(PurchasedBook.book_title == book_title)
            .limit(1)
        )
        if result.first() is not None:
            raise ConflictError(
                "Book already purchased",
                context={"user_id": user_id, "book_title": book_title},
            )

        db.add(PurchasedBook(user_id=user_id, book_title=book_title))
        await db.flush()
        logger.info("User %d purchased '%s'", user_id, book_title)

    async def list_purchased(self, db: AsyncSession, user_id: int) -> List[BookResponse]:
        """
        Catalog entries of every title the user bought, in purchase order.

        Purchases whose title no longer matches a catalog entry are skipped.
        """
        query = (
            select(BookCard)
            .join(PurchasedBook, PurchasedBook.book_title == BookCard.title)
            .where(PurchasedBook.user_id == user_id)
            .order_by(PurchasedBook.id)
        )
        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            logger.error("Database error listing purchases of user %d: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not retrieve purchased books. Please try again.",
                context={"user_id": user_id},
            )
        return [BookResponse.model_validate(book) for book in result.scalars().all()]


purchase_service = PurchaseService()
