"""Calendar helpers for ISO date strings."""

from datetime import date, datetime, timedelta, timezone

ISO_DATE_FORMAT = "%Y-%m-%d"


def today_iso() -> str:
    """Return the current local calendar day as YYYY-MM-DD."""
    return date.today().isoformat()


def now_iso() -> str:
    """Return the current UTC timestamp in ISO-8601 form."""
    return datetime.now(timezone.utc).isoformat()


def parse_iso_date(value: str) -> date | None:
    """Parse a strict YYYY-MM-DD string.

    Returns None for anything else, including non-padded forms like
    "2026-1-5" that would break lexicographic ordering.
    """
    try:
        parsed = datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None
    if parsed.isoformat() != value:
        return None
    return parsed


def add_days(day: date, offset: int) -> date:
    """Shift a date by a number of days."""
    return day + timedelta(days=offset)
