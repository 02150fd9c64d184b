"""Tests for result models and aggregation."""

import pytest
from pydantic import ValidationError

from datacheck.core.errors import ValidationFailedError
from datacheck.expectations.models import ColumnExists, ValuesNotNull
from datacheck.quality.aggregator import aggregate
from datacheck.quality.models import DatasetInfo, ExpectationResult, ValidationResult


def _result(column: str, success: bool) -> ExpectationResult:
    return ExpectationResult.of(ColumnExists(column=column), success)


class TestExpectationResult:
    def test_of_uses_description(self):
        result = ExpectationResult.of(ValuesNotNull(column="a"), True, null_count=0)
        assert result.message == "expect column 'a' values to not be null"
        assert result.details == {"null_count": 0}
        assert result.kind == "values_not_null"

    def test_frozen(self):
        result = ExpectationResult.of(ValuesNotNull(column="a"), True, null_count=0)
        with pytest.raises(ValidationError):
            result.details = {}
        with pytest.raises(ValidationError):
            result.success = False


class TestAggregate:
    def test_counts(self):
        result = aggregate([_result("a", True), _result("b", False), _result("c", True)])
        assert result.total_expectations == 3
        assert result.expectations_met == 2
        assert result.expectations_failed == 1
        assert result.success is False
        assert result.has_failures

    def test_order_preserved(self):
        results = [_result(c, True) for c in "xyz"]
        assert aggregate(results).results == results

    def test_all_pass(self):
        result = aggregate([_result("a", True)])
        assert result.success
        assert result.summary() == "Validation passed: 1/1 expectations met"

    def test_failed_and_passed_views(self):
        result = aggregate([_result("a", True), _result("b", False)])
        assert [r.expectation.column for r in result.failed_expectations()] == ["b"]
        assert [r.expectation.column for r in result.passed_expectations()] == ["a"]

    def test_dataset_info_default(self):
        assert aggregate([_result("a", True)]).dataset_info == DatasetInfo()


class TestValidationResultInvariants:
    def test_inconsistent_counts_rejected(self):
        with pytest.raises(ValidationError):
            ValidationResult(
                success=True,
                results=[_result("a", True)],
                total_expectations=1,
                expectations_met=2,
                expectations_failed=0,
            )

    def test_success_must_match_failures(self):
        with pytest.raises(ValidationError):
            ValidationResult(
                success=True,
                results=[_result("a", False)],
                total_expectations=1,
                expectations_met=0,
                expectations_failed=1,
            )

    def test_total_must_match_results(self):
        with pytest.raises(ValidationError):
            ValidationResult(
                success=True,
                results=[],
                total_expectations=1,
                expectations_met=1,
                expectations_failed=0,
            )


class TestValidationFailedError:
    def test_message_lists_failures(self):
        result = aggregate([_result("a", True), _result("b", False)])
        error = ValidationFailedError(result)
        assert error.result is result
        assert str(error).splitlines() == [
            "Validation failed with 1 failed expectation(s)",
            "  - expect column 'b' to exist",
        ]
