"""Tests for timestamp parsing."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from datacheck.analysis.temporal.parsing import interval_seconds, is_valid_timestamp, parse_timestamp


class TestParseTimestamp:
    @pytest.mark.parametrize(
        "value",
        [
            "2025-11-25T10:00:00Z",
            "2025-11-25T10:00:00",
            "2025-11-25 10:00:00",
            "11/25/2025 10:00:00",
            datetime(2025, 11, 25, 10, 0, 0),
            datetime(2025, 11, 25, 10, 0, 0, tzinfo=UTC),
            int(datetime(2025, 11, 25, 10, 0, 0, tzinfo=UTC).timestamp()),
        ],
    )
    def test_formats_agree(self, value):
        assert parse_timestamp(value) == datetime(2025, 11, 25, 10, 0, 0, tzinfo=UTC)

    def test_offset_is_converted_to_utc(self):
        parsed = parse_timestamp("2025-11-25T12:00:00+02:00")
        assert parsed == datetime(2025, 11, 25, 10, 0, 0, tzinfo=UTC)

    def test_aware_datetime_converted(self):
        value = datetime(2025, 1, 1, 5, 0, tzinfo=timezone(timedelta(hours=5)))
        assert parse_timestamp(value) == datetime(2025, 1, 1, 0, 0, tzinfo=UTC)

    def test_date_only(self):
        assert parse_timestamp("2025-01-15") == datetime(2025, 1, 15, tzinfo=UTC)
        assert parse_timestamp(date(2025, 1, 15)) == datetime(2025, 1, 15, tzinfo=UTC)

    @pytest.mark.parametrize(
        "value",
        ["hello", "", "2025-13-01", "13/45/2025 10:00:00", 0, 5_000_000_000, True, 3.5, None],
    )
    def test_invalid(self, value):
        assert parse_timestamp(value) is None
        assert not is_valid_timestamp(value)


class TestIntervalSeconds:
    def test_units(self):
        assert interval_seconds(1, "hour") == 3600
        assert interval_seconds(2, "day") == 172800

    def test_unknown_unit(self):
        with pytest.raises(ValueError, match="Unknown interval unit"):
            interval_seconds(1, "fortnight")
