"""Tests for string format checks."""

import uuid

import pytest

from datacheck.expectations.models import MatchesFormat, ValidEmails, ValidUrls, ValidUuids
from datacheck.quality.checks.strings import is_valid_email, is_valid_url, is_valid_uuid


def _column(values) -> list[dict]:
    return [{"v": v} for v in values]


class TestPredicates:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("alice@example.com", True),
            ("a.b+tag@sub.example.org", True),
            ("not-an-email", False),
            ("no@tld", False),
            ("spaces in@example.com", False),
            (42, False),
        ],
    )
    def test_email(self, value, expected):
        assert is_valid_email(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("https://example.com/path?q=1", True),
            ("HTTP://Example.com", True),
            ("ftp://example.com", False),
            ("https://localhost", False),
            ("example.com", False),
            ("https://", False),
            (None, False),
        ],
    )
    def test_url(self, value, expected):
        assert is_valid_url(value, ("http", "https")) is expected

    def test_url_without_tld_requirement(self):
        assert is_valid_url("http://localhost:8080", ("http",), require_tld=False)

    def test_uuid_versions(self):
        value = str(uuid.uuid4())
        assert is_valid_uuid(value)
        assert is_valid_uuid(value.upper(), version=4)
        assert not is_valid_uuid(value, version=1)
        assert not is_valid_uuid("1234")


class TestStringChecks:
    def test_emails(self, run_check, customers):
        result = run_check(ValidEmails(column="email"), customers)
        assert not result.success
        assert result.details["checked_count"] == 3
        assert result.details["valid_count"] == 2
        assert result.details["invalid_examples"] == ["not-an-email"]
        assert result.details["invalid_indices"] == [2]

    def test_urls_with_custom_schemes(self, run_check):
        expectation = ValidUrls(column="v", schemes=("ftp",))
        assert run_check(expectation, _column(["ftp://files.example.com"])).success
        assert not run_check(expectation, _column(["https://example.com"])).success

    def test_uuids(self, run_check):
        records = _column([str(uuid.uuid4()), None, str(uuid.uuid4())])
        assert run_check(ValidUuids(column="v", version=4), records).success

    @pytest.mark.parametrize(
        ("fmt", "good", "bad"),
        [
            ("us_phone", "(555) 123-4567", "12-34"),
            ("iso_date", "2025-01-31", "31/01/2025"),
            ("iso_datetime", "2025-01-31T10:00:00Z", "2025-01-31 10:00"),
            ("ip_address", "192.168.0.1", "256.1.1.1"),
            ("hex_color", "#a1B2c3", "#12345"),
        ],
    )
    def test_formats(self, run_check, fmt, good, bad):
        result = run_check(MatchesFormat(column="v", format=fmt), _column([good, bad]))
        assert not result.success
        assert result.details["invalid_examples"] == [bad]

    def test_missing_column(self, run_check, people):
        result = run_check(ValidEmails(column="email"), people)
        assert result.details["column_found"] is False
