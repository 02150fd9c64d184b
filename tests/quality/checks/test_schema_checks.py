"""Tests for column presence, type and count checks."""

from datetime import date

import pytest

from datacheck.expectations.models import ColumnCountEquals, ColumnExists, ColumnType


class TestColumnExists:
    def test_present_everywhere(self, run_check, people):
        assert run_check(ColumnExists(column="age"), people).success

    def test_missing_from_some_records(self, run_check, customers):
        result = run_check(ColumnExists(column="email"), customers)
        assert not result.success
        assert result.details["records_missing"] == 1
        assert result.details["missing_indices"] == [4]

    def test_null_value_still_counts_as_present(self, run_check):
        assert run_check(ColumnExists(column="a"), [{"a": None}]).success

    def test_empty_dataset_fails(self, run_check):
        result = run_check(ColumnExists(column="a"), [])
        assert not result.success
        assert result.details["row_count"] == 0


class TestColumnType:
    @pytest.mark.parametrize(
        ("type_name", "values", "expected"),
        [
            ("integer", [1, 2, None], True),
            ("integer", [1, 2.5], False),
            ("float", [1.5, 2.5], True),
            ("number", [1, 2.5], True),
            ("number", [1, True], False),
            ("string", ["a", "b"], True),
            ("boolean", [True, False], True),
            ("boolean", [1, 0], False),
            ("timestamp", [date(2025, 1, 1)], True),
            ("list", [[1], []], True),
            ("map", [{"k": 1}], True),
        ],
    )
    def test_type_matching(self, run_check, type_name, values, expected):
        result = run_check(ColumnType(column="v", type=type_name), [{"v": v} for v in values])
        assert result.success is expected

    def test_mismatch_details(self, run_check):
        result = run_check(ColumnType(column="v", type="integer"), [{"v": 1}, {"v": "x"}])
        assert result.details["mismatch_count"] == 1
        assert result.details["mismatch_indices"] == [1]
        assert result.details["observed_types"] == {"integer": 1, "string": 1}

    def test_missing_column(self, run_check, people):
        result = run_check(ColumnType(column="zip", type="string"), people)
        assert not result.success
        assert result.details["column_found"] is False
        assert "not found" in result.message


class TestColumnCount:
    def test_union_of_keys(self, run_check):
        records = [{"a": 1}, {"b": 2}]
        assert run_check(ColumnCountEquals(n=2), records).success
        result = run_check(ColumnCountEquals(n=3), records)
        assert not result.success
        assert result.details["observed"] == 2
        assert result.details["columns"] == ["a", "b"]
