"""Create a local user and print an access token for it.

Usage:
    python scripts/create_user.py

Environment overrides:
    NOTICES_USER_LOGIN=admin
    NOTICES_USER_NAME=Administrator
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from core import create_access_token  # noqa: E402
from db.session import AsyncSessionMaker  # noqa: E402
from models import User  # noqa: E402
from services.common import eq  # noqa: E402

LOGIN_ENV = "NOTICES_USER_LOGIN"
NAME_ENV = "NOTICES_USER_NAME"
DEFAULT_LOGIN = "admin"


def _read_login(raw_value: str | None) -> str:
    if raw_value is None or raw_value.strip() == "":
        return DEFAULT_LOGIN
    return raw_value.strip()


async def get_or_create_user(
    session: AsyncSession,
    *,
    login: str,
    name: str | None,
) -> tuple[User, bool]:
    result = await session.execute(select(User).where(eq(User.login, login)))
    user = result.scalar_one_or_none()
    if user is not None:
        return user, False

    user = User(login=login, name=name)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user, True


async def run() -> None:
    login = _read_login(os.getenv(LOGIN_ENV))
    name = os.getenv(NAME_ENV) or None

    async with AsyncSessionMaker() as session:
        user, created = await get_or_create_user(session, login=login, name=name)

    action = "Created" if created else "Reusing"
    print(f"{action} user {user.login} ({user.id})")
    print(create_access_token(user.id))


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
