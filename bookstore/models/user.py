"""
Bookstore Backend — User SQLAlchemy Model
============================================

What:  ORM model for the `users` table.
Who:   Used by UserService (register, login, profile) and joined by
       ReviewService to show reviewer names.

Lifecycle:
    1. Created on POST /register with a bcrypt password hash
    2. Read on login and GET /user
    3. email/username mutated on PUT /user
    4. Never deleted
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Unique index backs up the application-level duplicate check in register
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    # bcrypt output ("$2b$12$..."), never returned by the API
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    username: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
