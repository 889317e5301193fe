"""
Bookstore Backend — PurchasedBook SQLAlchemy Model
=====================================================

What:  ORM model for the `purchased_books` table linking a user to a title.

Invariant:
    At most one row per (user_id, book_title). This is enforced by
    PurchaseService checking before the insert, not by a database
    constraint, so two concurrent identical purchases can both succeed.

book_title is a copy of BookCard.title rather than a foreign key; a
purchase whose title no longer matches any book is simply skipped when
listing.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class PurchasedBook(Base):
    __tablename__ = "purchased_books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    book_title: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<PurchasedBook(user_id={self.user_id}, book_title='{self.book_title}')>"
