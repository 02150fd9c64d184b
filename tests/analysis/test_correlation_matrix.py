"""Tests for pairwise correlation matrices."""

import math

import pytest

from datacheck.analysis.correlation.matrix import correlation_matrix, paired_values


@pytest.fixture
def sparse_dataset() -> list[dict]:
    return [
        {"a": 1, "b": 2, "c": None},
        {"a": 2, "b": 4, "c": 1},
        {"a": 3, "b": 6, "c": 1},
        {"a": 4, "b": None, "c": 1},
        {"a": 5, "d": "text"},
    ]


class TestPairedValues:
    def test_pairwise_deletion(self, sparse_dataset):
        xs, ys = paired_values(sparse_dataset, "a", "b")
        assert xs == [1, 2, 3]
        assert ys == [2, 4, 6]

    def test_non_numeric_values_are_missing(self):
        data = [{"x": 1, "y": True}, {"x": 2, "y": "3"}, {"x": 3, "y": 4}]
        assert paired_values(data, "x", "y") == ([3], [4])


class TestCorrelationMatrix:
    def test_diagonal(self, sparse_dataset):
        matrix = correlation_matrix(sparse_dataset, ["a", "b", "c"])
        assert matrix["a"]["a"] == 1.0
        assert matrix["b"]["b"] == 1.0
        # c has no variance
        assert matrix["c"]["c"] is None

    def test_uses_all_rows_available_to_each_pair(self, sparse_dataset):
        matrix = correlation_matrix(sparse_dataset, ["a", "b"])
        assert matrix["a"]["b"] == pytest.approx(1.0, abs=0.001)

    def test_undefined_pair_is_none(self, sparse_dataset):
        matrix = correlation_matrix(sparse_dataset, ["a", "c"])
        assert matrix["a"]["c"] is None
        assert matrix["c"]["a"] is None

    def test_symmetric(self):
        data = [
            {"x": 1.0, "y": 3.0, "z": 9.0},
            {"x": 2.0, "y": 1.0, "z": 7.5},
            {"x": 3.5, "y": 4.0, "z": 2.0},
            {"x": 4.0, "y": 2.5, "z": None},
            {"x": 6.0, "y": 6.0, "z": 1.0},
        ]
        names = ["x", "y", "z"]
        matrix = correlation_matrix(data, names)
        for a in names:
            for b in names:
                assert matrix[a][b] == matrix[b][a]
            assert matrix[a][a] == pytest.approx(1.0)

    def test_non_numeric_column_is_undefined(self, sparse_dataset):
        matrix = correlation_matrix(sparse_dataset, ["a", "d"])
        assert matrix["d"]["d"] is None
        assert matrix["a"]["d"] is None

    def test_duplicate_columns_collapse(self, sparse_dataset):
        matrix = correlation_matrix(sparse_dataset, ["a", "b", "a"])
        assert list(matrix) == ["a", "b"]

    def test_spearman_method(self):
        data = [{"x": x, "y": x**3} for x in range(1, 8)]
        matrix = correlation_matrix(data, ["x", "y"], method="spearman")
        assert matrix["x"]["y"] == pytest.approx(1.0)

    def test_empty_dataset(self):
        matrix = correlation_matrix([], ["a"])
        assert matrix == {"a": {"a": None}}

    def test_infinite_value_makes_pair_undefined(self):
        data = [{"a": 1, "b": 5}, {"a": math.inf, "b": 1}, {"a": 2, "b": 9}]
        matrix = correlation_matrix(data, ["a", "b"])
        assert matrix["a"]["b"] is None
        assert matrix["b"]["a"] is None
        assert matrix["a"]["a"] is None
        assert matrix["b"]["b"] == 1.0
