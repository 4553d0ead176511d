# src/query_board/db/time.py
"""Time utilities for database models and API responses."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive timestamp read back from the database.

    Some backends (SQLite) drop the offset of ``DateTime(timezone=True)``
    columns; stored values are always UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
