"""Notice dismissal persistence operations."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from db.errors import is_unique_violation
from models import Property
from services.properties import save_property, select_properties, select_user_properties

from .keys import (
    AVAILABLE_NOTICE_KEYS,
    NoticeKey,
    dismissed_notice_property_key,
    parse_notice_key,
)

logger = logging.getLogger(__name__)


async def dismiss_notice_for_user(
    session: AsyncSession,
    user_id: str,
    *,
    notice: str | NoticeKey,
) -> bool:
    """Record that `user_id` dismissed `notice`.

    Returns True when a new record was written and False when the notice was
    already dismissed. Both outcomes are success for the caller.
    """
    if not user_id:
        raise ValueError("user_id must not be empty")
    notice_key = parse_notice_key(notice)
    prop_key = dismissed_notice_property_key(notice_key)

    existing = await select_properties(session, key=prop_key, user_id=user_id)
    if existing:
        logger.debug(
            "Notice already dismissed",
            extra={"user_id": user_id, "notice": notice_key.value},
        )
        return False

    try:
        await save_property(session, Property(prop_key=prop_key, user_uuid=user_id))
    except IntegrityError as exc:
        if not is_unique_violation(exc):
            raise
        # A concurrent request inserted the same row first.
        logger.info(
            "Notice dismissed concurrently",
            extra={"user_id": user_id, "notice": notice_key.value},
        )
        return False

    logger.info(
        "Dismissed notice",
        extra={"user_id": user_id, "notice": notice_key.value},
    )
    return True


async def load_dismissed_notices(
    session: AsyncSession,
    user_id: str,
) -> dict[NoticeKey, bool]:
    key_to_notice = {
        dismissed_notice_property_key(notice): notice for notice in AVAILABLE_NOTICE_KEYS
    }
    properties = await select_user_properties(
        session,
        user_id=user_id,
        keys=key_to_notice.keys(),
    )
    dismissed = {key_to_notice[prop.prop_key] for prop in properties}
    return {notice: notice in dismissed for notice in AVAILABLE_NOTICE_KEYS}
