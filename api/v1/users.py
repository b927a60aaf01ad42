"""Current-user endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_current_user, get_current_user_id, get_db
from models import User
from services.notices import (
    CurrentUserResponse,
    NoticeKey,
    dismiss_notice_for_user,
    load_dismissed_notices,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/current", response_model=CurrentUserResponse)
async def get_current_user_profile(
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
    user_id: str = Depends(get_current_user_id),
) -> CurrentUserResponse:
    dismissed_notices = await load_dismissed_notices(session, user_id)
    return CurrentUserResponse(
        id=user_id,
        login=current_user.login,
        name=current_user.name,
        dismissed_notices={
            notice.value: dismissed for notice, dismissed in dismissed_notices.items()
        },
    )


@router.post(
    "/dismiss_notice",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Dismiss a notice for the current user",
    description=(
        "Dismiss a notice for the current user. "
        "Silently ignore if the notice is already dismissed."
    ),
)
async def dismiss_notice(
    notice: Annotated[NoticeKey, Query(description="notice key to dismiss")],
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> Response:
    await dismiss_notice_for_user(session, user_id, notice=notice)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
