"""
Bookstore Backend — Catalog & Root Endpoint Tests
====================================================
"""

from urllib.parse import quote, quote_plus

import pytest


@pytest.mark.asyncio
async def test_root_greeting(test_client):
    response = await test_client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Hello World!"


@pytest.mark.asyncio
async def test_health(test_client):
    response = await test_client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert "uptimeSeconds" in body


@pytest.mark.asyncio
async def test_request_id_is_echoed(test_client):
    response = await test_client.get("/books", headers={"X-Request-ID": "abc12345"})
    assert response.headers["X-Request-ID"] == "abc12345"


class TestListBooks:

    @pytest.mark.asyncio
    async def test_seeded_catalog(self, test_client):
        response = await test_client.get("/books")

        assert response.status_code == 200
        books = response.json()
        assert [book["title"] for book in books] == [
            "The Sixth Child",
            "The Book of God",
            "The Hobbit",
        ]

    @pytest.mark.asyncio
    async def test_book_shape_is_camel_case(self, test_client):
        books = (await test_client.get("/books")).json()
        hobbit = books[2]
        assert hobbit == {
            "id": hobbit["id"],
            "title": "The Hobbit",
            "author": "J.R.R. Tolkien",
            "description": "A classic fantasy novel...",
            "price": "$12.99",
            "imageId": 3,
        }


class TestGetBookByTitle:

    @pytest.mark.asyncio
    async def test_found(self, test_client):
        response = await test_client.get(f"/api/book/{quote('The Hobbit')}")
        assert response.status_code == 200
        assert response.json()["author"] == "J.R.R. Tolkien"

    @pytest.mark.asyncio
    async def test_form_encoded_title(self, test_client):
        """Client encodes spaces as '+'."""
        response = await test_client.get(f"/api/book/{quote_plus('The Book of God')}")
        assert response.status_code == 200
        assert response.json()["title"] == "The Book of God"

    @pytest.mark.asyncio
    async def test_surrounding_whitespace_is_trimmed(self, test_client):
        response = await test_client.get(f"/api/book/{quote('  The Hobbit ')}")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_unknown_title(self, test_client):
        response = await test_client.get(f"/api/book/{quote('No Such Book: Part 2')}")
        assert response.status_code == 404
        assert response.json()["message"] == "Book not found"

    @pytest.mark.asyncio
    async def test_blank_title_is_not_found(self, test_client):
        response = await test_client.get(f"/api/book/{quote('   ')}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_absent_title(self, test_client):
        response = await test_client.get("/api/book/")
        assert response.status_code == 400
        assert response.json()["message"] == "Title parameter is missing"
