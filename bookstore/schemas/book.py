"""
Bookstore Backend — Book Schemas
==================================

`BookResponse` is used for the catalog (GET /books, GET /api/book/{title})
and for the purchased-books list, which returns the catalog entry of every
purchased title.
"""

from typing import Any

from pydantic import Field, field_validator

from bookstore.schemas.common import ApiModel


class BookResponse(ApiModel):
    id: int
    title: str
    author: str
    # Nullable in the table; the client expects a string
    description: str = ""
    price: str
    image_id: int = Field(description="Identifier of the cover drawable bundled with the client")

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v: Any) -> Any:
        return "" if v is None else v


class PurchaseRequest(ApiModel):
    """Body of POST /purchase."""
    book_title: str
