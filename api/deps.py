"""Shared FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator

import jwt
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from core import ACCESS_TOKEN_TYPE, decode_token
from db.session import get_session
from models import User

ACCESS_COOKIE = "access_token"
BEARER_PREFIX = "bearer "


async def get_db() -> AsyncIterator[AsyncSession]:
    async for session in get_session():
        yield session


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _extract_token(request: Request) -> str | None:
    token = request.cookies.get(ACCESS_COOKIE)
    if token:
        return token
    authorization = request.headers.get("authorization", "")
    if authorization.lower().startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX) :].strip() or None
    return None


async def get_current_user(
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> User:
    """Return the logged-in user or fail with 401."""
    token = _extract_token(request)
    if token is None:
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_token(token)
    except jwt.PyJWTError as exc:
        raise _unauthorized("Invalid authentication token") from exc

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise _unauthorized("Invalid authentication token")
    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise _unauthorized("Invalid authentication token")

    user = await session.get(User, user_id)
    if user is None:
        raise _unauthorized("Not authenticated")
    return user


async def get_current_user_id(
    current_user: User = Depends(get_current_user),
) -> str:
    if not current_user.id:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User record missing identifier",
        )
    return current_user.id
