"""Tests for the top-level package interface."""

import datacheck


class TestPublicApi:
    def test_all_names_resolve(self):
        for name in datacheck.__all__:
            assert hasattr(datacheck, name), name

    def test_quickstart(self):
        dataset = [{"age": 25, "name": "Alice"}, {"age": 30, "name": "Bob"}]
        result = datacheck.evaluate(
            dataset,
            [
                datacheck.ColumnExists(column="age"),
                datacheck.ValuesBetween(column="age", min=0, max=120),
            ],
        )
        assert result.success
        assert datacheck.profile(dataset).column_count == 2

    def test_drift_round_trip(self):
        reference = [{"v": float(i), "c": "x"} for i in range(50)]
        baseline = datacheck.create_baseline(reference)
        assert not datacheck.detect_drift(reference, baseline).drifted
