from __future__ import annotations

from datetime import date, datetime

INVALID_DATE = "Invalid Date"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

TIME_FORMATS = ("%H:%M:%S.%f", "%H:%M:%S", "%H:%M")
ZONE_FORMATS = ("", "%z", " %z")

# Accepted date text, tried in order.
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    *(
        f"%Y-%m-%d{sep}{time_fmt}{zone_fmt}"
        for sep in ("T", " ")
        for time_fmt in TIME_FORMATS
        for zone_fmt in ZONE_FORMATS
    ),
)


def parse_date_text(value: str) -> date | None:
    """Parse date text into a calendar date, or None if unreadable."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value: str) -> str:
    """Render date text as "Month D, YYYY"."""
    parsed = parse_date_text(value)
    if parsed is None:
        return INVALID_DATE
    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_reading_time(minutes: int) -> str:
    """Render a minute count as "X min read" or "Yh Zm read"."""
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise ValueError(f"reading time must be an integer, got {minutes!r}")
    if minutes < 0:
        raise ValueError(f"reading time must be non-negative, got {minutes}")
    if minutes < 60:
        return f"{minutes} min read"
    hours, remaining = divmod(minutes, 60)
    return f"{hours}h {remaining}m read"
