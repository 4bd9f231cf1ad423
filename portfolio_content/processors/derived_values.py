"""
Values computed from documents rather than written by authors.
"""

import math
from datetime import date, datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser

KOREAN_CHARS_PER_MINUTE = 300
WORDS_PER_MINUTE = 200

PARSE_DEFAULT = datetime(2000, 1, 1)
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def calculate_reading_time(body: str, locale: str) -> int:
    """
    Estimate reading time in whole minutes, rounded up.

    Korean text is measured in characters, everything else in
    whitespace-separated words. An empty body gives 0.

    Args:
        body: Document body
        locale: Locale of the document

    Returns:
        Reading time in minutes
    """
    if locale == "ko":
        return math.ceil(len(body) / KOREAN_CHARS_PER_MINUTE)
    words = len(body.split())
    return math.ceil(words / WORDS_PER_MINUTE)


def to_date_string(value: Any) -> str:
    """
    Normalize a front matter date to ``YYYY-MM-DD``.

    YAML decodes ``2024-01-15`` to a date and full timestamps to a datetime.
    Timestamps are converted to UTC before truncation; naive ones are
    taken as UTC. Any other value is stringified as-is, and a missing
    value becomes an empty string.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if value is None:
        return ""
    return str(value)


def parse_date_value(value: str) -> Optional[datetime]:
    """
    Parse a date string into an aware UTC datetime.

    Accepts ``YYYY-MM-DD`` as well as looser forms such as full ISO
    timestamps or ``Jan 5, 2024``. Naive values are taken as UTC; a
    missing day defaults to the first and a missing time to midnight.

    Returns:
        The parsed datetime, or None if value is not a date
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = date_parser.parse(value, default=PARSE_DEFAULT)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def date_sort_key(value: str) -> datetime:
    """Sort key for date strings; unparseable dates sort oldest."""
    return parse_date_value(value) or OLDEST
