"""Date helpers for window spans. No engine imports."""

from __future__ import annotations

from datetime import date, datetime


def parse_date(value: object) -> date | None:
    """Parse an ISO date (or datetime) into a date; None when unparsable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def diff_days_inclusive(start: date, end: date) -> int | None:
    """Number of days covered by [start, end], counting both ends. None when end precedes start."""
    if end < start:
        return None
    return (end - start).days + 1


def format_window_span(start: date | None, end: date | None, placeholder: str = "Window unavailable") -> str:
    """'14 days (2024-01-01 to 2024-01-14)', or the placeholder for a missing or inverted window."""
    if start is None or end is None:
        return placeholder
    days = diff_days_inclusive(start, end)
    if days is None:
        return placeholder
    unit = "day" if days == 1 else "days"
    return f"{days} {unit} ({start.isoformat()} to {end.isoformat()})"
