from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def year_bounds(year: int) -> tuple[datetime, datetime]:
    """Inclusive UTC bounds of a calendar year, millisecond precision."""
    start = datetime(year, 1, 1, 0, 0, 0, 0, tzinfo=timezone.utc)
    end = datetime(year, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)
    return start, end


def to_iso_z(value: datetime | None) -> str | None:
    """Render as ``2026-01-31T08:00:00.000Z``."""
    if value is None:
        return None
    value = as_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
