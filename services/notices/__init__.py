"""Notice domain services."""

from .dismissals import dismiss_notice_for_user, load_dismissed_notices
from .keys import (
    AVAILABLE_NOTICE_KEYS,
    NoticeKey,
    dismissed_notice_property_key,
    parse_notice_key,
)
from .schemas import CurrentUserResponse

__all__ = [
    "NoticeKey",
    "AVAILABLE_NOTICE_KEYS",
    "CurrentUserResponse",
    "parse_notice_key",
    "dismissed_notice_property_key",
    "dismiss_notice_for_user",
    "load_dismissed_notices",
]
