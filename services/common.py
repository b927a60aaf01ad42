"""Shared SQLAlchemy expression helpers."""

from __future__ import annotations

from typing import Any, cast

from sqlalchemy.sql import ColumnElement


def eq(column: Any, value: Any) -> ColumnElement[bool]:
    """Typed equality expression helper."""
    return cast(ColumnElement[bool], column == value)


def in_(column: Any, values: Any) -> ColumnElement[bool]:
    """Typed membership expression helper."""
    return cast(ColumnElement[bool], cast(Any, column).in_(values))
