"""
Bookstore Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the error cases of the API.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) catch these
       and return JSON error responses with the matching HTTP status code.
Who:   Raised by services and route dependencies; caught by global handlers.

Exception Hierarchy:
    BookstoreError (base)
    ├── ValidationError       → 400 Bad Request (malformed/missing input)
    ├── AuthenticationError   → 401 Unauthorized (wrong password)
    ├── NotFoundError         → 404 Not Found (referenced entity absent)
    ├── ConflictError         → 409 Conflict (duplicate / state conflict)
    ├── FileStorageError      → 400 Bad Request (upload failed)
    └── DatabaseError         → 500 Internal Server Error

None of these are retried and none are fatal to the process.
"""

from typing import Any, Dict, Optional


class BookstoreError(Exception):
    """
    Base exception for all bookstore application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookstoreError):
    """
    Raised when client input fails validation.

    When:    Missing or non-numeric User-Id header, rating outside 1-5,
             mismatched user id on profile update, empty title.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(BookstoreError):
    """Raised when a login password does not match the stored hash (HTTP 401)."""

    def __init__(
        self,
        message: str = "Invalid password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BookstoreError):
    """
    Raised when a requested or referenced resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that into this
    exception so the handler can answer 404.

    Example:
        NotFoundError(resource="book")  →  "Book not found"
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(BookstoreError):
    """
    Raised when a write would violate a uniqueness rule.

    When:    Duplicate email on register/update, second purchase of the same
             title, second review of the same book by the same user.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(BookstoreError):
    """
    Raised when an upload could not be stored.

    HTTP:    400 Bad Request with a generic message; the OS error is only logged.
    """

    def __init__(
        self,
        message: str = "Failed to upload image",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(BookstoreError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic; the underlying
    error is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
