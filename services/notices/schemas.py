"""Notice API payload schemas."""

from __future__ import annotations

from pydantic import BaseModel


class CurrentUserResponse(BaseModel):
    id: str
    login: str
    name: str | None
    # Every known notice key, true once the user dismissed it.
    dismissed_notices: dict[str, bool]
