"""
Bookstore Backend — Book Catalog Service
==========================================

What:  Read-only access to the `book_cards` catalog.
Who:   Called by GET /books and GET /api/book/{title}, and by the purchase
       and review services to check that a referenced book exists.

No pagination, filtering or sorting: the catalog is a handful of rows and
is returned in database order.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.exceptions import DatabaseError, NotFoundError
from bookstore.models import BookCard
from bookstore.schemas.book import BookResponse

logger = logging.getLogger(__name__)


class BookService:

    async def list_books(self, db: AsyncSession) -> List[BookResponse]:
        try:
            result = await db.execute(select(BookCard))
        except SQLAlchemyError as e:
            logger.error("Database error listing books: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve books. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return [BookResponse.model_validate(book) for book in result.scalars().all()]

    async def find_by_title(self, db: AsyncSession, title: str) -> Optional[BookCard]:
        result = await db.execute(select(BookCard).where(BookCard.title == title).limit(1))
        return result.scalar_one_or_none()

    async def get_by_title(self, db: AsyncSession, title: str) -> BookResponse:
        """
        Look a book up by its exact title.

        Raises:
            NotFoundError: no book carries this title (→ 404)
        """
        book = await self.find_by_title(db, title)
        if book is None:
            raise NotFoundError(resource="book", resource_id=title)
        return BookResponse.model_validate(book)

    async def exists(self, db: AsyncSession, book_id: int) -> bool:
        return await db.get(BookCard, book_id) is not None


book_service = BookService()
