"""
Bookstore Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock async session for service unit tests
    ├── app_settings: Settings pointing at a temp SQLite file + upload dir
    ├── app: A fresh FastAPI app built from app_settings
    ├── test_client: HTTPX AsyncClient driving `app` with its lifespan running
    └── register_user: Helper that registers a user through the API
"""

import os
import tempfile

# Override settings for testing BEFORE any bookstore imports
# Why: the module-level app in bookstore.main reads the environment on import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="bookstore_test_"), "app.db"
)
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="bookstore_uploads_")
os.environ["BCRYPT_ROUNDS"] = "4"  # cost 12 would make every register take ~250ms
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bookstore.config import Settings
from bookstore.main import create_app


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        result = MagicMock()
        result.scalar_one_or_none.return_value = user
        mock_db_session.execute.return_value = result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def app_settings(tmp_path):
    """Settings isolated to this test: own database file and upload directory."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'bookstore.db'}",
        upload_dir=str(tmp_path / "uploads"),
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not send lifespan events, so the lifespan (schema
    creation, seeding, upload directory) is entered explicitly around it.

    Usage:
        async def test_books(test_client):
            response = await test_client.get("/books")
            assert response.status_code == 200
    """
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def register_user(test_client):
    """
    Returns an async helper that registers a user and returns the JSON body.

        user = await register_user("a@example.com", username="alice")
    """

    async def _register(email: str, password: str = "secret-pass", username: str = "reader"):
        response = await test_client.post(
            "/register",
            json={"email": email, "password": password, "username": username},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _register
