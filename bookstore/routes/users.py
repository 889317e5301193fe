"""
Bookstore Backend — User Route Handlers
=========================================

What:  POST /register, POST /login, GET /user, PUT /user.

Authentication is nominal: /login checks the password and hands out a
placeholder token, but GET/PUT /user trust whatever the User-Id header says.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.config import Settings
from bookstore.database import get_db_session
from bookstore.routes.deps import get_current_user_id, get_settings
from bookstore.schemas.common import ErrorResponse
from bookstore.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserSchema,
)
from bookstore.services.user_service import user_service

router = APIRouter(tags=["Users"])


@router.post(
    "/register",
    response_model=UserSchema,
    responses={409: {"description": "Email already registered", "model": ErrorResponse}},
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> UserSchema:
    return await user_service.register(db, body, bcrypt_rounds=settings.bcrypt_rounds)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"description": "Invalid password", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Log in with email and password",
)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    return await user_service.login(db, body)


@router.get(
    "/user",
    response_model=UserSchema,
    responses={
        400: {"description": "User-Id header missing or invalid", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Get the caller's profile",
)
async def get_user(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> UserSchema:
    return await user_service.get_user(db, user_id)


@router.put(
    "/user",
    response_model=UserSchema,
    responses={
        400: {"description": "Bad header or user id mismatch", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
        409: {"description": "Email used by another user", "model": ErrorResponse},
    },
    summary="Update the caller's email and username",
)
async def update_user(
    body: UserSchema,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> UserSchema:
    return await user_service.update_user(db, user_id, body)
