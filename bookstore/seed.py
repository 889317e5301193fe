"""
Bookstore Backend — Seed Data
===============================

What:  Fills an empty catalog with three books and an empty review table
       with one sample review.
When:  Called by `Database.initialize()` at startup when seeding is enabled.

The sample review belongs to the first registered user, or to user id 1
when nobody has registered yet. SQLite does not enforce the foreign key,
so that review can point at a user row that does not exist (yet).
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.models import BookCard, BookReview, User

logger = logging.getLogger(__name__)

SEED_BOOKS = [
    {
        "title": "The Sixth Child",
        "author": "Manith J.",
        "price": "$15.00",
        "image_id": 1,
        "description": "Begin with eight Sisters...",
    },
    {
        "title": "The Book of God",
        "author": "Walter Wangerin",
        "price": "$16.88",
        "image_id": 2,
        "description": "... a feat of imagination and faith.",
    },
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "price": "$12.99",
        "image_id": 3,
        "description": "A classic fantasy novel...",
    },
]

SEED_REVIEW_BOOK_TITLE = "The Hobbit"
SEED_REVIEW_FALLBACK_USER_ID = 1


async def _is_empty(db: AsyncSession, model) -> bool:
    result = await db.execute(select(model.id).limit(1))
    return result.first() is None


async def seed_database(db: AsyncSession) -> None:
    """Insert the seed rows into empty tables. Does not commit."""
    if await _is_empty(db, BookCard):
        db.add_all([BookCard(**book) for book in SEED_BOOKS])
        await db.flush()
        logger.info("Seeded %d books", len(SEED_BOOKS))

    if await _is_empty(db, BookReview):
        result = await db.execute(
            select(BookCard.id).where(BookCard.title == SEED_REVIEW_BOOK_TITLE).limit(1)
        )
        book_id = result.scalar_one_or_none()
        if book_id is None:
            # Catalog was populated by someone else without this title
            logger.warning("Seed review skipped: '%s' is not in the catalog", SEED_REVIEW_BOOK_TITLE)
            return

        result = await db.execute(select(User.id).order_by(User.id).limit(1))
        user_id = result.scalar_one_or_none() or SEED_REVIEW_FALLBACK_USER_ID

        db.add(
            BookReview(
                book_id=book_id,
                user_id=user_id,
                rating=5,
                comment="Amazing book, a must-read!",
            )
        )
        await db.flush()
        logger.info("Seeded sample review for book %d by user %d", book_id, user_id)
