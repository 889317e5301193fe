"""
Bookstore Backend — BookCard SQLAlchemy Model
================================================

What:  ORM model for the `book_cards` catalog table.
Why:   Each row carries the display metadata of one book. The catalog is
       seeded on startup and is read-only through the API.

Design notes:
    - price is free-form text ("$12.99") because the client only displays it
    - image_id refers to a drawable bundled with the mobile client, not to
      an uploaded file
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class BookCard(Base):
    __tablename__ = "book_cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    price: Mapped[str] = mapped_column(String(50), nullable=False)
    image_id: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<BookCard(id={self.id}, title='{self.title}')>"
