"""
Bookstore Backend — ORM Models
================================

Importing this package registers every table with `Base.metadata`, which
`Database.initialize()` and Alembic rely on.
"""

from bookstore.models.book import BookCard
from bookstore.models.purchase import PurchasedBook
from bookstore.models.review import BookReview
from bookstore.models.user import User

__all__ = ["BookCard", "BookReview", "PurchasedBook", "User"]
