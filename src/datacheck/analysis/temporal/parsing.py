"""Timestamp parsing.

Accepted inputs:
- ``datetime`` (naive values are taken as UTC) and ``date`` (midnight UTC)
- Unix seconds as integers between 2000-01-01 and 2100-01-01 (exclusive)
- ISO 8601 strings, with or without offset, ``T`` or space separated
- US style ``M/D/YYYY HH:MM:SS``
- ISO dates ``YYYY-MM-DD``

All parsed values are timezone-aware UTC datetimes so they compare safely.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time
from typing import Any

UNIX_MIN = 946_684_800  # 2000-01-01T00:00:00Z
UNIX_MAX = 4_102_444_800  # 2100-01-01T00:00:00Z

_US_DATETIME = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})[ T]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})$"
)

INTERVAL_UNITS: dict[str, int] = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
}


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _parse_us(text: str) -> datetime | None:
    match = _US_DATETIME.match(text)
    if match is None:
        return None
    parts = {k: int(v) for k, v in match.groupdict().items()}
    try:
        return datetime(
            parts["year"],
            parts["month"],
            parts["day"],
            parts["hour"],
            parts["minute"],
            parts["second"],
            tzinfo=UTC,
        )
    except ValueError:
        return None


def _parse_string(text: str) -> datetime | None:
    text = text.strip()
    if not text:
        return None
    try:
        # Handles offsets, "Z", space separators and date-only strings
        return to_utc(datetime.fromisoformat(text))
    except ValueError:
        pass
    return _parse_us(text)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a value into a UTC datetime, None when it is not a timestamp."""
    match value:
        case bool():
            return None
        case datetime():
            return to_utc(value)
        case date():
            return datetime.combine(value, time(), tzinfo=UTC)
        case int():
            if UNIX_MIN < value < UNIX_MAX:
                return datetime.fromtimestamp(value, UTC)
            return None
        case str():
            return _parse_string(value)
        case _:
            return None


def is_valid_timestamp(value: Any) -> bool:
    return parse_timestamp(value) is not None


def interval_seconds(value: float, unit: str) -> float:
    """Convert an interval like (1, "hour") to seconds."""
    try:
        return value * INTERVAL_UNITS[unit]
    except KeyError:
        raise ValueError(
            f"Unknown interval unit {unit!r}; expected one of {sorted(INTERVAL_UNITS)}"
        ) from None
