"""
Bookstore Backend — Database Store & Session Management
=========================================================

What:  The `Database` store (async engine + session factory), the ORM base
       class and the per-request session dependency.
How:   One `Database` is constructed by the app factory and kept on
       `app.state.database`; route handlers receive sessions from it through
       FastAPI's dependency injection instead of importing a global engine.
When:  `initialize()` runs once in the lifespan; sessions are per-request.

Transaction model:
    Every request runs inside exactly one session. `get_db_session` commits
    when the handler returns and rolls back if it raises, so each endpoint
    is a single transaction against SQLite.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with the shared metadata
    (used by `initialize()` and by Alembic).
    """
    pass


class Database:
    """
    Owns the database connection and the table lifecycle.

    Args:
        url:  Async SQLAlchemy URL, e.g. ``sqlite+aiosqlite:///./app.db``.
        echo: Log every SQL statement (only useful while debugging).
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo)
        # expire_on_commit=False: response models are built from ORM objects
        # after the dependency has committed.
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def initialize(self, seed: bool = True) -> None:
        """
        Create the tables if absent and insert the seed rows.

        Safe to call repeatedly: `create_all` skips existing tables and the
        seed step only fills empty tables.
        """
        # Registers every model with Base.metadata before create_all
        import bookstore.models  # noqa: F401
        from bookstore.seed import seed_database

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables users, book_cards, purchased_books, book_reviews ready")

        if seed:
            async with self.session() as session:
                await seed_database(session)
                await session.commit()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that is closed on exit (the caller commits)."""
        async with self.session_factory() as session:
            yield session

    async def dispose(self) -> None:
        """Close all pooled connections (called on application shutdown)."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the application's `Database`
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers

    Example usage in a route:
        @router.get("/books")
        async def list_books(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
