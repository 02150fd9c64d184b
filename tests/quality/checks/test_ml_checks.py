"""Tests for dataset-level checks: size, labels, features and drift."""

import pytest

from datacheck.analysis.drift.detector import create_column_baseline
from datacheck.expectations.models import (
    FeatureCorrelation,
    LabelBalance,
    LabelCardinality,
    NoDataDrift,
    NoMissingValues,
    RowCountBetween,
)


class TestRowCount:
    def test_inclusive(self, run_check, people):
        assert run_check(RowCountBetween(min=3, max=3), people).success
        result = run_check(RowCountBetween(min=4, max=10), people)
        assert not result.success
        assert result.details["row_count"] == 3


class TestNoMissingValues:
    def test_completeness(self, run_check, customers):
        result = run_check(NoMissingValues(column="score"), customers)
        assert not result.success
        assert result.details["missing_count"] == 1
        assert result.details["completeness"] == pytest.approx(0.8)

    def test_complete_column(self, run_check, customers):
        assert run_check(NoMissingValues(column="label"), customers).success


class TestLabelBalance:
    def test_balanced(self, run_check, customers):
        result = run_check(LabelBalance(column="label", min_ratio=0.3), customers)
        assert result.success
        assert result.details["class_distribution"] == {"a": 3, "b": 2}
        assert result.details["min_class_ratio"] == pytest.approx(0.4)

    def test_underrepresented(self, run_check, customers):
        result = run_check(LabelBalance(column="label", min_ratio=0.5), customers)
        assert not result.success
        assert result.details["underrepresented"] == ["b"]

    def test_ratio_uses_all_rows(self, run_check):
        records = [{"y": "a"}, {"y": "b"}, {"y": None}, {"y": None}]
        result = run_check(LabelBalance(column="y", min_ratio=0.3), records)
        assert result.details["min_class_ratio"] == pytest.approx(0.25)
        assert not result.success

    def test_no_labels_fails(self, run_check):
        assert not run_check(LabelBalance(column="y"), [{"y": None}]).success


class TestLabelCardinality:
    def test_within_range(self, run_check, customers):
        result = run_check(LabelCardinality(column="label"), customers)
        assert result.success
        assert result.details["cardinality"] == 2

    def test_too_few(self, run_check):
        records = [{"y": "only"}] * 3
        assert not run_check(LabelCardinality(column="y", min=2, max=5), records).success


class TestFeatureCorrelation:
    @pytest.fixture
    def features(self) -> list[dict]:
        return [{"x": i, "y": 2 * i + 1, "z": (-1) ** i} for i in range(10)]

    def test_leakage_detected(self, run_check, features):
        result = run_check(FeatureCorrelation(column_a="x", column_b="y"), features)
        assert not result.success
        assert result.details["abs_correlation"] == pytest.approx(1.0)

    def test_weak_correlation_passes(self, run_check, features):
        result = run_check(FeatureCorrelation(column_a="x", column_b="z"), features)
        assert result.success

    def test_min_bound(self, run_check, features):
        expectation = FeatureCorrelation(column_a="x", column_b="z", min=0.5, max=1.0)
        assert not run_check(expectation, features).success

    def test_spearman(self, run_check):
        records = [{"x": i, "y": i**3} for i in range(1, 8)]
        expectation = FeatureCorrelation(
            column_a="x", column_b="y", min=0.99, max=1.0, method="spearman"
        )
        result = run_check(expectation, records)
        assert result.success
        assert result.details["correlation"] == pytest.approx(1.0)

    def test_undefined_correlation_fails(self, run_check):
        records = [{"x": 1, "y": 1}, {"x": 1, "y": 2}, {"x": 1, "y": 3}]
        result = run_check(FeatureCorrelation(column_a="x", column_b="y"), records)
        assert not result.success
        assert result.details["correlation"] is None

    def test_missing_second_column(self, run_check, features):
        result = run_check(FeatureCorrelation(column_a="x", column_b="w"), features)
        assert result.details["column"] == "w"


class TestNoDataDrift:
    def test_numeric_same_distribution(self, run_check):
        baseline = create_column_baseline(list(range(100)))
        records = [{"v": i} for i in range(100)]
        result = run_check(NoDataDrift(column="v", baseline=baseline), records)
        assert result.success
        assert result.details["method"] == "ks"
        assert result.details["drift_score"] == pytest.approx(0.0)

    def test_numeric_shift(self, run_check):
        baseline = create_column_baseline(list(range(100)))
        records = [{"v": i + 50} for i in range(100)]
        result = run_check(NoDataDrift(column="v", baseline=baseline), records)
        assert not result.success
        assert result.details["drift_score"] == pytest.approx(0.5)

    def test_categorical_shift(self, run_check):
        baseline = create_column_baseline(["a"] * 50 + ["b"] * 50)
        records = [{"v": "a"}] * 90 + [{"v": "b"}] * 10
        result = run_check(NoDataDrift(column="v", baseline=baseline, threshold=0.1), records)
        assert not result.success
        assert result.details["method"] == "psi"

    def test_no_values_fails(self, run_check):
        baseline = create_column_baseline([1.0, 2.0])
        assert not run_check(NoDataDrift(column="v", baseline=baseline), [{"v": None}]).success
