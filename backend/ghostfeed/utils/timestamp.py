"""Timestamp parsing and display utilities."""
from datetime import datetime, timezone


def parse_timestamp(s: str) -> datetime:
    """
    Parse a timestamp string into a datetime object.

    Supports multiple formats:
    - ISO format with "Z" suffix: "2024-01-02T09:10:00Z"
    - ISO format with timezone: "2024-01-02T09:10:00+00:00"
    - ISO format without timezone: "2024-01-02T09:10:00"
    - Space-separated: "2024-01-02 09:10:00"

    Naive values are assumed to be UTC.

    Raises:
        ValueError: If timestamp cannot be parsed
    """
    if not s:
        raise ValueError("Empty timestamp string")

    s = s.strip()

    # Convert trailing "Z" to "+00:00" for ISO format compatibility
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    candidates = [s]
    if " " in s and "T" not in s:
        candidates.append(s.replace(" ", "T", 1))

    for candidate in candidates:
        try:
            dt = datetime.fromisoformat(candidate)
        except ValueError:
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    raise ValueError(f"Unable to parse timestamp: {s}. Expected ISO format (e.g., '2024-01-02T09:10:00Z' or '2024-01-02T09:10:00+00:00')")


def format_timestamp(dt: datetime) -> str:
    """Render a timestamp as e.g. ``Jan 5, 2026 at 3:07 PM``."""
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.strftime('%b')} {dt.day}, {dt.year} at {hour}:{dt.minute:02d} {meridiem}"
