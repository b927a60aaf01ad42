"""Per-user key/value property persistence model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint, func
from sqlmodel import Field, SQLModel

MAX_PROPERTY_KEY_LENGTH = 512


class Property(SQLModel, table=True):
    """A single user-scoped property; a null value marks a flag-style entry."""

    __tablename__ = "properties"
    __table_args__ = (
        UniqueConstraint(
            "user_uuid",
            "prop_key",
            name="ux_properties_user_key",
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    prop_key: str = Field(
        sa_column=Column(String(MAX_PROPERTY_KEY_LENGTH), nullable=False, index=True)
    )
    user_uuid: str = Field(
        sa_column=Column(
            String(40),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    text_value: str | None = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )
    created_at: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )
    )
