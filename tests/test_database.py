"""
Bookstore Backend — Store Initialization Tests
=================================================

What:  Schema creation and seeding performed by Database.initialize().
"""

import pytest
from sqlalchemy import func, select

from bookstore.database import Database
from bookstore.models import BookCard, BookReview, User


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'store.db'}"


async def count(database: Database, model) -> int:
    async with database.session() as session:
        return (await session.execute(select(func.count(model.id)))).scalar_one()


@pytest.mark.asyncio
async def test_initialize_creates_file_and_seeds(tmp_path, database_url):
    database = Database(database_url)
    try:
        await database.initialize()

        assert (tmp_path / "store.db").exists()
        assert await count(database, BookCard) == 3
        assert await count(database, BookReview) == 1
        assert await count(database, User) == 0
    finally:
        await database.dispose()


@pytest.mark.asyncio
async def test_initialize_is_idempotent(database_url):
    database = Database(database_url)
    try:
        await database.initialize()
        await database.initialize()

        assert await count(database, BookCard) == 3
        assert await count(database, BookReview) == 1
    finally:
        await database.dispose()


@pytest.mark.asyncio
async def test_seed_review_uses_first_existing_user(database_url):
    database = Database(database_url)
    try:
        await database.initialize(seed=False)
        async with database.session() as session:
            session.add_all([
                User(id=5, email="five@example.com", password_hash="x", username="five"),
                User(id=9, email="nine@example.com", password_hash="x", username="nine"),
            ])
            await session.commit()

        await database.initialize()

        async with database.session() as session:
            seeded = (await session.execute(select(BookReview))).scalar_one()
            hobbit = (
                await session.execute(select(BookCard).where(BookCard.title == "The Hobbit"))
            ).scalar_one()
        assert seeded.user_id == 5
        assert seeded.book_id == hobbit.id
        assert seeded.rating == 5
    finally:
        await database.dispose()


@pytest.mark.asyncio
async def test_no_seed(database_url):
    database = Database(database_url)
    try:
        await database.initialize(seed=False)
        assert await count(database, BookCard) == 0
    finally:
        await database.dispose()
