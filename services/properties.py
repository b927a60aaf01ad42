"""User property store operations.

All functions run on the caller's session; the caller owns the transaction
scope and closes the session.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models import Property

from .common import eq, in_


async def select_properties(
    session: AsyncSession,
    *,
    key: str,
    user_id: str,
) -> list[Property]:
    """Return the properties stored under `key` for `user_id`."""
    result = await session.execute(
        select(Property)
        .where(
            eq(Property.prop_key, key),
            eq(Property.user_uuid, user_id),
        )
        .order_by(cast(Any, Property.id))
    )
    return list(result.scalars().all())


async def select_user_properties(
    session: AsyncSession,
    *,
    user_id: str,
    keys: Iterable[str],
) -> list[Property]:
    """Return the user's properties whose key is one of `keys`."""
    key_list = list(keys)
    if not key_list:
        return []
    result = await session.execute(
        select(Property).where(
            eq(Property.user_uuid, user_id),
            in_(Property.prop_key, key_list),
        )
    )
    return list(result.scalars().all())


async def save_property(session: AsyncSession, prop: Property) -> Property:
    """Insert `prop` and commit; the transaction is rolled back on failure."""
    session.add(prop)
    try:
        await session.commit()
    except SQLAlchemyError:
        await session.rollback()
        raise
    return prop
