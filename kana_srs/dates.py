"""
Local calendar-day helpers.

Daily limits and aggregates are bucketed by the device's local date, not UTC.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

import pandas as pd

DateLike = Union[int, float, datetime, date, None]


def to_local_datetime(value: DateLike = None) -> datetime:
    """Convert epoch ms or a datetime to a naive local datetime."""
    if value is None:
        return datetime.now()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromtimestamp(value / 1000)


def local_date_key(value: DateLike = None) -> str:
    """Local YYYY-MM-DD key for epoch ms, a datetime, or now."""
    return to_local_datetime(value).strftime("%Y-%m-%d")


def start_of_local_day_ms(timestamp: Optional[int] = None) -> int:
    """Epoch ms of local midnight on the day containing timestamp."""
    midnight = to_local_datetime(timestamp).replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp() * 1000)


def normalize_date_key(value: str) -> str:
    """
    Collapse a stored date string to the canonical local YYYY-MM-DD key.

    Accepts plain dates, ISO datetimes with or without an offset, and
    verbose forms such as "Tue Mar 05 2024". Strings that cannot be parsed
    are returned unchanged so lookups stay stable.
    """
    text = (value or "").strip()
    if not text:
        return value

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        stamp = pd.to_datetime(text, errors="coerce")
        if pd.isna(stamp):
            return value
        parsed = stamp.to_pydatetime()

    # Naive values are already local; offset-aware ones are converted
    return local_date_key(parsed)
