"""Dataset-level checks used around model training: size, labels, features, drift."""

from __future__ import annotations

from collections import Counter

from datacheck.analysis.correlation.algorithms import correlate
from datacheck.analysis.correlation.matrix import paired_values
from datacheck.analysis.drift.detector import column_drift
from datacheck.core.models.base import is_null
from datacheck.core.values import hashable, non_null
from datacheck.expectations.models import (
    FeatureCorrelation,
    LabelBalance,
    LabelCardinality,
    NoDataDrift,
    NoMissingValues,
    RowCountBetween,
)
from datacheck.quality.checks.base import CheckContext, column_not_found
from datacheck.quality.models import ExpectationResult


def check_row_count(expectation: RowCountBetween, ctx: CheckContext) -> ExpectationResult:
    return ExpectationResult.of(
        expectation,
        expectation.min <= ctx.row_count <= expectation.max,
        row_count=ctx.row_count,
        min=expectation.min,
        max=expectation.max,
    )


def check_no_missing_values(expectation: NoMissingValues, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    values = ctx.values(expectation.column)
    missing = [i for i, v in enumerate(values) if is_null(v)]
    completeness = (len(values) - len(missing)) / len(values) if values else 0.0
    return ExpectationResult.of(
        expectation,
        not missing,
        missing_count=len(missing),
        total_count=len(values),
        completeness=completeness,
        missing_indices=ctx.examples(missing),
    )


def _label_counts(ctx: CheckContext, column: str) -> tuple[Counter, dict]:
    counts: Counter = Counter()
    labels: dict = {}
    for value in non_null(ctx.values(column)):
        key = hashable(value)
        counts[key] += 1
        labels.setdefault(key, value)
    return counts, labels


def check_label_balance(expectation: LabelBalance, ctx: CheckContext) -> ExpectationResult:
    """Each label's share of all rows must reach ``min_ratio``; no labels fails."""
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    counts, labels = _label_counts(ctx, expectation.column)
    ratios = {key: n / ctx.row_count for key, n in counts.items()} if ctx.row_count else {}
    min_ratio = min(ratios.values()) if ratios else 0.0
    underrepresented = [str(labels[k]) for k, r in ratios.items() if r < expectation.min_ratio]
    return ExpectationResult.of(
        expectation,
        bool(ratios) and not underrepresented,
        num_classes=len(counts),
        row_count=ctx.row_count,
        min_class_ratio=min_ratio,
        min_ratio_threshold=expectation.min_ratio,
        class_distribution={str(labels[k]): n for k, n in counts.items()},
        underrepresented=underrepresented,
    )


def check_label_cardinality(expectation: LabelCardinality, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    counts, labels = _label_counts(ctx, expectation.column)
    return ExpectationResult.of(
        expectation,
        expectation.min <= len(counts) <= expectation.max,
        cardinality=len(counts),
        min=expectation.min,
        max=expectation.max,
        labels=ctx.examples([labels[k] for k in counts]),
    )


def check_feature_correlation(
    expectation: FeatureCorrelation, ctx: CheckContext
) -> ExpectationResult:
    """Pairwise deletion of nulls; an undefined correlation fails."""
    for column in (expectation.column_a, expectation.column_b):
        if not ctx.has_column(column):
            return column_not_found(expectation, ctx, column)

    xs, ys = paired_values(ctx.dataset, expectation.column_a, expectation.column_b)
    r = correlate(xs, ys, expectation.method)
    if r is None:
        success = False
    else:
        success = abs(r) <= expectation.max and (
            expectation.min is None or abs(r) >= expectation.min
        )
    return ExpectationResult.of(
        expectation,
        success,
        correlation=r,
        abs_correlation=abs(r) if r is not None else None,
        method=expectation.method,
        sample_size=len(xs),
        min=expectation.min,
        max=expectation.max,
    )


def check_no_data_drift(expectation: NoDataDrift, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    score = column_drift(ctx.values(expectation.column), expectation.baseline)
    return ExpectationResult.of(
        expectation,
        score is not None and score <= expectation.threshold,
        drift_score=score,
        threshold=expectation.threshold,
        method="ks" if expectation.baseline.kind == "numeric" else "psi",
    )
