"""Distribution drift detection.

Numeric columns are compared with the two-sample Kolmogorov-Smirnov
statistic, categorical columns with the Population Stability Index.

PSI reading guide: < 0.1 no significant shift, 0.1-0.2 moderate,
>= 0.2 significant.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from scipy import stats

from datacheck.analysis.drift.models import Baseline, ColumnBaseline, DriftResult
from datacheck.analysis.statistics.algorithms import mean, stdev
from datacheck.core.logging import get_logger
from datacheck.core.models.base import NUMERIC_TYPES, classify_value
from datacheck.core.values import columns, extract, non_null

logger = get_logger(__name__)

DEFAULT_THRESHOLD = 0.05
# Proportion used for a category absent on one side
PSI_FLOOR = 0.001
# Leading values inspected to decide numeric vs categorical
NUMERIC_SAMPLE = 10


def ks_test(sample_a: Sequence[float], sample_b: Sequence[float]) -> tuple[float, float]:
    """Two-sample KS test.

    Returns:
        Tuple of (ks_statistic, p_value)

    Raises:
        ValueError: If either sample is empty
    """
    if len(sample_a) == 0 or len(sample_b) == 0:
        raise ValueError("KS test requires two non-empty samples")
    result = stats.ks_2samp(sample_a, sample_b)
    return float(result.statistic), float(result.pvalue)


def psi(baseline_dist: Mapping[str, float], current_dist: Mapping[str, float]) -> float:
    """Population Stability Index between two category -> proportion maps."""
    total = 0.0
    for category in dict.fromkeys([*baseline_dist, *current_dist]):
        expected = baseline_dist.get(category, PSI_FLOOR) or PSI_FLOOR
        actual = current_dist.get(category, PSI_FLOOR) or PSI_FLOOR
        total += (actual - expected) * math.log(actual / expected)
    return total


def _category(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _numbers(values: Sequence[Any]) -> list[float]:
    """Numeric values as floats; integers beyond the float range are left out."""
    numbers: list[float] = []
    for value in values:
        if classify_value(value) not in NUMERIC_TYPES:
            continue
        try:
            numbers.append(float(value))
        except OverflowError:
            continue
    return numbers


def _is_numeric_column(values: Sequence[Any]) -> bool:
    if not values:
        return False
    return all(classify_value(v) in NUMERIC_TYPES for v in values[:NUMERIC_SAMPLE])


def create_column_baseline(values: Sequence[Any]) -> ColumnBaseline:
    present = non_null(values)
    if _is_numeric_column(present):
        numbers = _numbers(present)
        return ColumnBaseline(
            kind="numeric",
            values=numbers,
            mean=mean(numbers),
            stdev=stdev(numbers),
            total=len(numbers),
        )
    frequencies = Counter(_category(v) for v in present)
    return ColumnBaseline(kind="categorical", frequencies=dict(frequencies), total=len(present))


def create_baseline(dataset: Sequence[Mapping[str, Any]]) -> Baseline:
    """Capture the distribution of every column of a reference dataset."""
    return {column: create_column_baseline(extract(dataset, column)) for column in columns(dataset)}


def column_drift(values: Sequence[Any], baseline: ColumnBaseline) -> float | None:
    """Drift score of one column, None when either side has no values."""
    present = non_null(values)
    if baseline.kind == "numeric":
        current = _numbers(present)
        if not current or not baseline.values:
            return None
        statistic, _ = ks_test(baseline.values, current)
        return statistic

    if not present or baseline.total == 0:
        return None
    current_counts = Counter(_category(v) for v in present)
    baseline_dist = {c: n / baseline.total for c, n in baseline.frequencies.items()}
    current_dist = {c: n / len(present) for c, n in current_counts.items()}
    return psi(baseline_dist, current_dist)


def detect_drift(
    dataset: Sequence[Mapping[str, Any]],
    baseline: Baseline,
    threshold: float = DEFAULT_THRESHOLD,
    method: Literal["auto", "ks", "psi"] = "auto",
) -> DriftResult:
    """Compare a dataset against a baseline column by column."""
    scores = {
        column: column_drift(extract(dataset, column), column_baseline)
        for column, column_baseline in baseline.items()
    }
    result = DriftResult.from_scores(scores, threshold, method)
    logger.debug(
        "drift_detected" if result.drifted else "no_drift_detected",
        columns=len(scores),
        columns_drifted=result.columns_drifted,
    )
    return result
