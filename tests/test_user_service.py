"""
Bookstore Backend — User Service Unit Tests
===============================================

What:  Tests for UserService business rules without a real database.
How:   Uses the mock AsyncSession from conftest; query results are MagicMocks.

What we test:
    ✅ Duplicate email on register raises ConflictError and writes nothing
    ✅ Register hashes the password and returns the public user
    ✅ Login: unknown email → NotFoundError, wrong password → AuthenticationError
    ✅ Update: id mismatch, missing user, email owned by someone else
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bookstore.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from bookstore.schemas.user import LoginRequest, RegisterRequest, UserSchema
from bookstore.security import hash_password
from bookstore.services.user_service import UserService


def query_result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


def stored_user(user_id=1, email="a@example.com", username="alice", password="secret"):
    user = MagicMock()
    user.id = user_id
    user.email = email
    user.username = username
    user.password_hash = hash_password(password, rounds=4)
    return user


class TestRegister:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(stored_user())

        with pytest.raises(ConflictError, match="already exists"):
            await self.service.register(
                mock_db_session,
                RegisterRequest(email="a@example.com", password="x", username="other"),
            )

        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_success(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(None)

        async def assign_id():
            mock_db_session.add.call_args.args[0].id = 7

        mock_db_session.flush = AsyncMock(side_effect=assign_id)

        with patch("bookstore.services.user_service.hash_password", return_value="hashed") as mock_hash:
            result = await self.service.register(
                mock_db_session,
                RegisterRequest(email="new@example.com", password="pw", username="newbie"),
            )

        mock_hash.assert_called_once_with("pw", None)
        added = mock_db_session.add.call_args.args[0]
        assert added.password_hash == "hashed"
        assert result == UserSchema(id=7, email="new@example.com", username="newbie")

    @pytest.mark.asyncio
    async def test_register_hashes_with_given_rounds(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(None)

        async def assign_id():
            mock_db_session.add.call_args.args[0].id = 7

        mock_db_session.flush = AsyncMock(side_effect=assign_id)

        with patch("bookstore.services.user_service.hash_password", return_value="hashed") as mock_hash:
            await self.service.register(
                mock_db_session,
                RegisterRequest(email="new@example.com", password="pw", username="newbie"),
                bcrypt_rounds=6,
            )

        mock_hash.assert_called_once_with("pw", 6)


class TestLogin:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_unknown_email(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(None)

        with pytest.raises(NotFoundError, match="User not found"):
            await self.service.login(
                mock_db_session, LoginRequest(email="ghost@example.com", password="x")
            )

    @pytest.mark.asyncio
    async def test_wrong_password(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(stored_user(password="right"))

        with pytest.raises(AuthenticationError):
            await self.service.login(
                mock_db_session, LoginRequest(email="a@example.com", password="wrong")
            )

    @pytest.mark.asyncio
    async def test_success_returns_placeholder_token(self, mock_db_session):
        mock_db_session.execute.return_value = query_result(stored_user(user_id=3, password="right"))

        result = await self.service.login(
            mock_db_session, LoginRequest(email="a@example.com", password="right")
        )

        assert result.user.id == 3
        assert result.token == "fake-token-3"


class TestUpdateUser:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_id_mismatch(self, mock_db_session):
        with pytest.raises(ValidationError, match="User ID mismatch"):
            await self.service.update_user(
                mock_db_session, 1, UserSchema(id=2, email="b@example.com", username="bob")
            )
        mock_db_session.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_user(self, mock_db_session):
        mock_db_session.get.return_value = None

        with pytest.raises(NotFoundError):
            await self.service.update_user(
                mock_db_session, 5, UserSchema(id=5, email="e@example.com", username="eve")
            )

    @pytest.mark.asyncio
    async def test_email_owned_by_other_user(self, mock_db_session):
        me = stored_user(user_id=1)
        mock_db_session.get.return_value = me
        mock_db_session.execute.return_value = query_result(stored_user(user_id=2, email="b@example.com"))

        with pytest.raises(ConflictError, match="already in use"):
            await self.service.update_user(
                mock_db_session, 1, UserSchema(id=1, email="b@example.com", username="alice")
            )
        assert me.email == "a@example.com"

    @pytest.mark.asyncio
    async def test_keeping_own_email_is_not_a_conflict(self, mock_db_session):
        me = stored_user(user_id=1)
        mock_db_session.get.return_value = me
        mock_db_session.execute.return_value = query_result(me)

        update = UserSchema(id=1, email="a@example.com", username="alice2")
        result = await self.service.update_user(mock_db_session, 1, update)

        assert result == update
        assert me.username == "alice2"
