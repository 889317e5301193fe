"""
Bookstore Backend — Review Schemas
====================================
"""

from typing import Any, Optional

from pydantic import field_validator

from bookstore.schemas.common import ApiModel, Int32


class ReviewRequest(ApiModel):
    """
    Body of POST /reviews.

    rating is range-checked by ReviewService (not here) so that an
    out-of-range value is reported as "Rating must be between 1 and 5".
    """
    book_id: Int32
    rating: int
    comment: Optional[str] = None


class ReviewResponse(ApiModel):
    id: int
    book_id: int
    user_id: int
    username: str = ""
    rating: int
    comment: str = ""

    @field_validator("username", "comment", mode="before")
    @classmethod
    def empty_string(cls, v: Any) -> Any:
        return "" if v is None else v
