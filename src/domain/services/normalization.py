"""Domain normalization helpers."""

from datetime import date, datetime


def normalize_text(value) -> str:
    """Return a trimmed string, treating non-strings as empty.

    Args:
        value: Raw value from a command payload.

    Returns:
        str: Trimmed string value.
    """
    if not isinstance(value, str):
        return ""
    return value.strip()


def parse_calendar_date(value) -> date | None:
    """Parse a calendar date from a date, datetime or ISO 8601 string.

    Timestamps such as ``2025-01-15T10:00:00Z`` keep their calendar day.

    Args:
        value: Raw date value.

    Returns:
        date | None: Parsed date, or None when the value is not a valid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned.replace("Z", "+00:00")).date()
    except ValueError:
        return None


__all__ = ["normalize_text", "parse_calendar_date"]
