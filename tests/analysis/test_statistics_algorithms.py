"""Tests for descriptive statistics primitives."""

import pytest

from datacheck.analysis.statistics.algorithms import (
    as_float_array,
    maximum,
    mean,
    median,
    minimum,
    quantile,
    stdev,
    summary,
    variance,
)


class TestMean:
    def test_empty_is_undefined(self):
        assert mean([]) is None

    def test_arithmetic_mean(self):
        assert mean([1, 2, 3, 4]) == pytest.approx(2.5)

    def test_single_value(self):
        assert mean([7]) == 7.0

    def test_integer_beyond_float_range_is_undefined(self):
        assert mean([10**400, 1]) is None


class TestStdev:
    """Sample convention (Bessel's correction)."""

    def test_sample_standard_deviation(self):
        # Population stdev of this classic sequence is exactly 2.0
        assert stdev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx((32 / 7) ** 0.5)

    def test_fewer_than_two_points_is_undefined(self):
        assert stdev([]) is None
        assert stdev([42]) is None

    def test_constant_sequence_is_exactly_zero(self):
        assert stdev([0.1, 0.1, 0.1]) == 0.0
        assert variance([3, 3, 3]) == 0.0

    def test_variance_matches_stdev(self):
        xs = [1.5, 2.5, 10.0, -4.0]
        assert stdev(xs) ** 2 == pytest.approx(variance(xs))

    def test_integer_beyond_float_range_is_undefined(self):
        assert stdev([10**400, 1]) is None
        assert variance([1, -(10**400)]) is None


class TestOrderStatistics:
    def test_median_odd_and_even(self):
        assert median([3, 1, 2]) == 2.0
        assert median([1, 2, 3, 4]) == 2.5
        assert median([]) is None

    def test_quantile_linear_interpolation(self):
        assert quantile([1, 2, 3, 4, 5], 0.25) == pytest.approx(2.0)
        assert quantile([1, 2, 3, 4], 0.5) == pytest.approx(2.5)
        assert quantile([10, 20], 0.1) == pytest.approx(11.0)

    def test_quantile_bounds(self):
        assert quantile([5, 1, 9], 0.0) == 1.0
        assert quantile([5, 1, 9], 1.0) == 9.0
        assert quantile([], 0.5) is None

    def test_quantile_rejects_invalid_probability(self):
        with pytest.raises(ValueError, match="between 0 and 1"):
            quantile([1, 2, 3], 1.5)

    def test_min_max(self):
        assert minimum([3, -1, 2]) == -1
        assert maximum([3, -1, 2]) == 3
        assert minimum([]) is None
        assert maximum([]) is None

    def test_integer_beyond_float_range(self):
        assert median([10**400, 1, 2]) is None
        assert quantile([10**400, 1, 2], 0.5) is None
        assert maximum([10**400, 1]) == 10**400


class TestAsFloatArray:
    def test_converts_numbers(self):
        assert as_float_array([1, 2.5]).tolist() == [1.0, 2.5]

    def test_integer_beyond_float_range(self):
        assert as_float_array([1, 10**400]) is None


class TestSummary:
    def test_summary_fields(self):
        result = summary([1, 2, 3, 4, 5])
        assert result.count == 5
        assert result.min == 1
        assert result.max == 5
        assert result.mean == pytest.approx(3.0)
        assert result.median == pytest.approx(3.0)
        assert result.q25 == pytest.approx(2.0)
        assert result.q75 == pytest.approx(4.0)
        assert result.to_dict()["stdev"] == pytest.approx(2.5**0.5)

    def test_summary_of_empty(self):
        result = summary([])
        assert result.count == 0
        assert result.mean is None
        assert result.stdev is None
