"""
Bookstore Backend — Review Service
====================================

What:  Adds reviews and lists the reviews of a book.
Who:   Called by POST /reviews and GET /reviews/{bookId}.

Review flow (one transaction):
    1. rating must be within 1..5                     → 400 otherwise
    2. the book must exist                            → 404 otherwise
    3. the user must not have reviewed this book yet  → 409 otherwise
    4. insert

Like purchases, step 3 is a check-then-insert without a unique constraint.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from bookstore.models import BookReview, User
from bookstore.schemas.review import ReviewRequest, ReviewResponse
from bookstore.services.book_service import book_service

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class ReviewService:

    async def add_review(self, db: AsyncSession, user_id: int, request: ReviewRequest) -> None:
        """
        Raises:
            ValidationError: rating outside 1..5 (→ 400)
            NotFoundError: book does not exist (→ 404)
            ConflictError: user already reviewed this book (→ 409)
        """
        if not MIN_RATING <= request.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}",
                field="rating",
                context={"rating": request.rating},
            )

        if not await book_service.exists(db, request.book_id):
            raise NotFoundError(resource="book", resource_id=str(request.book_id))

        result = await db.execute(
            select(BookReview.id)
            .where(BookReview.book_id == request.book_id)
            .where(BookReview.user_id == user_id)
            .limit(1)
        )
        if result.first() is not None:
            raise ConflictError(
                "User already reviewed this book",
                context={"user_id": user_id, "book_id": request.book_id},
            )

        db.add(
            BookReview(
                book_id=request.book_id,
                user_id=user_id,
                rating=request.rating,
                comment=request.comment,
            )
        )
        await db.flush()
        logger.info("User %d reviewed book %d (%d/5)", user_id, request.book_id, request.rating)

    async def list_reviews(self, db: AsyncSession, book_id: int) -> List[ReviewResponse]:
        """
        Reviews of a book with the reviewer's username, oldest first.

        An unknown book simply has no reviews. The username is empty when the
        review points at a user row that does not exist (the seeded review
        can, see bookstore.seed).
        """
        query = (
            select(BookReview, User.username)
            .outerjoin(User, User.id == BookReview.user_id)
            .where(BookReview.book_id == book_id)
            .order_by(BookReview.id)
        )
        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            logger.error("Database error listing reviews of book %d: %s", book_id, str(e))
            raise DatabaseError(
                message="Could not retrieve reviews. Please try again.",
                context={"book_id": book_id},
            )

        return [
            ReviewResponse(
                id=review.id,
                book_id=review.book_id,
                user_id=review.user_id,
                username=username,
                rating=review.rating,
                comment=review.comment,
            )
            for review, username in result.all()
        ]


review_service = ReviewService()
