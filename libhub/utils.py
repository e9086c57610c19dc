"""Utility functions for the backend."""

from datetime import UTC, datetime


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from backends without tz support (SQLite)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def ensure_utc_optional(value: datetime | None) -> datetime | None:
    """Like ensure_utc, passing None through."""
    return ensure_utc(value) if value is not None else None
