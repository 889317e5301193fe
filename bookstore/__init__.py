"""
Bookstore Backend — Application Package Initializer
====================================================

What: Marks the `bookstore` directory as a Python package.
Who:  Imported by uvicorn (`bookstore.main:app`), Alembic and pytest.

Architecture Note:
    The backend is layered the same way for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← lookups, uniqueness checks, writes
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy over SQLite
    └─────────────────────────────────────┘

    Routes parse headers and bodies, services run the queries inside the
    request's transaction, and the global exception handlers turn service
    errors into HTTP status codes.
"""

__version__ = "0.0.1"
