"""
Bookstore Backend — User Service
==================================

What:  Registration, login and profile read/update.
Who:   Called by the /register, /login and /user route handlers.

Uniqueness of email:
    Checked with a SELECT before every insert/update (409 on conflict). The
    check and the write are not atomic; the unique index on users.email is
    the last line of defense and its IntegrityError is reported as the same
    409 conflict.

Hashing runs in Starlette's threadpool: bcrypt at cost 12 takes a few
hundred milliseconds of CPU and would otherwise stall the event loop.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from bookstore.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from bookstore.models import User
from bookstore.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserSchema,
)
from bookstore.security import hash_password, issue_token, verify_password

logger = logging.getLogger(__name__)

EMAIL_EXISTS_MESSAGE = "User with this email already exists"
EMAIL_IN_USE_MESSAGE = "Email is already in use by another user"


class UserService:
    """Stateless; every method receives the request's session."""

    async def _find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email).limit(1))
        return result.scalar_one_or_none()

    async def _get(self, db: AsyncSession, user_id: int) -> User:
        user = await db.get(User, user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=str(user_id))
        return user

    async def register(
        self,
        db: AsyncSession,
        request: RegisterRequest,
        bcrypt_rounds: Optional[int] = None,
    ) -> UserSchema:
        """
        Create a user.

        `bcrypt_rounds` is the cost of the application the request came in
        through; None falls back to the process-wide setting.

        Raises:
            ConflictError: a user with this email already exists (→ 409)
        """
        if await self._find_by_email(db, request.email) is not None:
            raise ConflictError(EMAIL_EXISTS_MESSAGE, context={"email": request.email})

        password_hash = await run_in_threadpool(hash_password, request.password, bcrypt_rounds)
        user = User(
            email=request.email,
            password_hash=password_hash,
            username=request.username,
        )
        db.add(user)
        try:
            await db.flush()  # assigns user.id
        except IntegrityError:
            # Lost the race against a concurrent registration
            raise ConflictError(EMAIL_EXISTS_MESSAGE, context={"email": request.email})

        logger.info("Registered user %d", user.id)
        return UserSchema.model_validate(user)

    async def login(self, db: AsyncSession, request: LoginRequest) -> LoginResponse:
        """
        Check credentials and return the user with a placeholder token.

        Raises:
            NotFoundError: no user with this email (→ 404)
            AuthenticationError: password does not match (→ 401)
        """
        user = await self._find_by_email(db, request.email)
        if user is None:
            raise NotFoundError(resource="user")

        verified = await run_in_threadpool(verify_password, request.password, user.password_hash)
        if not verified:
            logger.info("Failed login for user %d", user.id)
            raise AuthenticationError()

        return LoginResponse(user=UserSchema.model_validate(user), token=issue_token(user.id))

    async def get_user(self, db: AsyncSession, user_id: int) -> UserSchema:
        return UserSchema.model_validate(await self._get(db, user_id))

    async def update_user(
        self, db: AsyncSession, user_id: int, update: UserSchema
    ) -> UserSchema:
        """
        Change email and username of the caller.

        The body must describe the caller (`update.id == user_id`). Returns
        the submitted representation.

        Raises:
            ValidationError: body id differs from the User-Id header (→ 400)
            NotFoundError: user does not exist (→ 404)
            ConflictError: email belongs to a different user (→ 409)
        """
        if update.id != user_id:
            raise ValidationError(
                "User ID mismatch",
                field="id",
                context={"header_id": user_id, "body_id": update.id},
            )

        user = await self._get(db, user_id)

        owner = await self._find_by_email(db, update.email)
        if owner is not None and owner.id != user_id:
            raise ConflictError(EMAIL_IN_USE_MESSAGE, context={"email": update.email})

        user.email = update.email
        user.username = update.username
        try:
            await db.flush()
        except IntegrityError:
            raise ConflictError(EMAIL_IN_USE_MESSAGE, context={"email": update.email})

        logger.info("Updated profile of user %d", user_id)
        return update


user_service = UserService()
