"""Recognized notice identifiers and their property-store keys."""

from __future__ import annotations

from enum import Enum

from core import settings


class NoticeKey(str, Enum):
    """Notices a user can dismiss. New notices are added here, not at runtime."""

    EDUCATION_PRINCIPLES = "educationPrinciples"
    SONARLINT_AD = "sonarlintAd"
    ISSUE_CLEAN_CODE_GUIDE = "issueCleanCodeGuide"
    QUALITY_GATE_CAYC_CONDITIONS_SIMPLIFICATION = "qualityGateCaYCConditionsSimplification"


AVAILABLE_NOTICE_KEYS: tuple[NoticeKey, ...] = tuple(NoticeKey)


def parse_notice_key(raw_notice: str | NoticeKey) -> NoticeKey:
    if isinstance(raw_notice, NoticeKey):
        return raw_notice
    try:
        return NoticeKey(raw_notice)
    except ValueError as exc:
        allowed = ", ".join(notice.value for notice in AVAILABLE_NOTICE_KEYS)
        raise ValueError(f"notice must be one of: {allowed}") from exc


def dismissed_notice_property_key(notice: NoticeKey) -> str:
    return f"{settings.dismissed_notice_key_prefix}{notice.value}"
