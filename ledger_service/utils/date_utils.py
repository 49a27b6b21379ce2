"""Date parsing and formatting utilities"""

from datetime import date, datetime, time, timezone
from typing import Union


def parse_date_bound(value: Union[str, date, datetime]) -> datetime:
    """
    Parse an ISO 8601 date or datetime into an aware UTC datetime.

    Date-only values ("2024-01-31") resolve to midnight UTC.
    Naive datetimes are treated as UTC. Raises ValueError when unparseable
    and TypeError for anything other than str, date or datetime.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif not isinstance(value, str):
        raise TypeError(f"Unsupported date bound type: {type(value).__name__}")
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render an instant as ISO 8601 UTC with millisecond precision, e.g. 2024-01-20T14:20:00.000Z"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
