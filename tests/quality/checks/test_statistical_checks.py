"""Tests for distribution-level checks."""

import numpy as np
import pytest

from datacheck.expectations.models import (
    MeanBetween,
    MedianBetween,
    QuantileEquals,
    StdevBetween,
    ValuesNormal,
)


def _column(values) -> list[dict]:
    return [{"v": v} for v in values]


class TestBetweenStatistics:
    def test_mean(self, run_check, customers):
        result = run_check(MeanBetween(column="age", min=35, max=40), customers)
        assert result.success
        assert result.details["observed_mean"] == pytest.approx(39.5)
        assert result.details["sample_size"] == 4

    def test_mean_out_of_range(self, run_check, people):
        result = run_check(MeanBetween(column="age", min=40, max=50), people)
        assert not result.success
        assert result.details["observed_mean"] == pytest.approx(30.0)

    def test_median(self, run_check):
        result = run_check(MedianBetween(column="v", min=2, max=3), _column([1, 2, 3, 100]))
        assert result.success
        assert result.details["observed_median"] == pytest.approx(2.5)

    def test_sample_stdev(self, run_check, people):
        result = run_check(StdevBetween(column="age", min=4.9, max=5.1), people)
        assert result.success
        assert result.details["observed_stdev"] == pytest.approx(5.0)

    def test_stdev_needs_two_values(self, run_check):
        result = run_check(StdevBetween(column="v", min=0, max=10), _column([1]))
        assert not result.success
        assert result.details["observed_stdev"] is None

    def test_non_numeric_values_are_counted(self, run_check):
        result = run_check(MeanBetween(column="v", min=0, max=10), _column([2, "x", True, None]))
        assert result.success
        assert result.details["observed_mean"] == 2.0
        assert result.details["non_numeric_count"] == 2

    def test_no_numbers_fails(self, run_check):
        result = run_check(MeanBetween(column="v", min=0, max=10), _column(["a", "b"]))
        assert not result.success
        assert result.details["observed_mean"] is None


class TestQuantileEquals:
    def test_within_default_tolerance(self, run_check):
        data = _column(range(1, 101))
        result = run_check(QuantileEquals(column="v", quantile=0.5, expected=50), data)
        assert result.success
        assert result.details["observed_quantile"] == pytest.approx(50.5)
        assert result.details["tolerance"] == pytest.approx(2.5)

    def test_outside_tolerance(self, run_check):
        data = _column(range(1, 101))
        expectation = QuantileEquals(column="v", quantile=0.9, expected=50, tolerance=1)
        result = run_check(expectation, data)
        assert not result.success
        assert result.details["difference"] == pytest.approx(40.1)

    def test_empty_column_fails(self, run_check):
        expectation = QuantileEquals(column="v", quantile=0.5, expected=1)
        assert not run_check(expectation, _column([None])).success


class TestValuesNormal:
    def test_normal_sample(self, run_check):
        rng = np.random.default_rng(7)
        data = _column(rng.normal(10, 2, size=500).tolist())
        result = run_check(ValuesNormal(column="v"), data)
        assert result.success
        assert result.details["p_value"] > 0.05

    def test_skewed_sample(self, run_check):
        rng = np.random.default_rng(7)
        data = _column(rng.exponential(1.0, size=500).tolist())
        result = run_check(ValuesNormal(column="v"), data)
        assert not result.success

    def test_insufficient_data(self, run_check):
        result = run_check(ValuesNormal(column="v"), _column([1, 2]))
        assert not result.success
        assert result.details["reason"] == "insufficient data or zero variance"

    def test_constant_column(self, run_check):
        assert not run_check(ValuesNormal(column="v"), _column([3, 3, 3, 3])).success
