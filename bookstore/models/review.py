"""
Bookstore Backend — BookReview SQLAlchemy Model
==================================================

What:  ORM model for the `book_reviews` table.

Invariants:
    - rating is an integer in 1..5 (validated by ReviewService)
    - at most one review per (book_id, user_id), checked before insert
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class BookReview(Base):
    __tablename__ = "book_reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    book_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("book_cards.id"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    def __repr__(self) -> str:
        return (
            f"<BookReview(id={self.id}, book_id={self.book_id}, "
            f"user_id={self.user_id}, rating={self.rating})>"
        )
