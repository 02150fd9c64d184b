"""Timestamp parsing helpers."""

from datacheck.analysis.temporal.parsing import (
    INTERVAL_UNITS,
    interval_seconds,
    is_valid_timestamp,
    parse_timestamp,
    to_utc,
)

__all__ = [
    "INTERVAL_UNITS",
    "interval_seconds",
    "is_valid_timestamp",
    "parse_timestamp",
    "to_utc",
]
