"""Classification of driver errors raised through SQLAlchemy."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError, IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"
# SQLite reports no SQLSTATE; match its message and PostgreSQL's wording.
UNIQUE_VIOLATION_MARKERS = ("unique constraint failed", "duplicate key value")


def driver_sqlstate(error: DBAPIError) -> str | None:
    """SQLSTATE of the wrapped driver error (asyncpg `sqlstate`, psycopg `pgcode`)."""
    driver_error = error.orig
    for attribute in ("sqlstate", "pgcode"):
        code = getattr(driver_error, attribute, None)
        if isinstance(code, str) and code:
            return code
    return None


def is_unique_violation(error: IntegrityError) -> bool:
    if driver_sqlstate(error) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    detail = str(error.orig if error.orig is not None else error).lower()
    return any(marker in detail for marker in UNIQUE_VIOLATION_MARKERS)


__all__ = [
    "UNIQUE_VIOLATION_MARKERS",
    "UNIQUE_VIOLATION_SQLSTATE",
    "driver_sqlstate",
    "is_unique_violation",
]
