"""Distribution-level checks over a column's numeric values.

Only integer and float values take part; nulls and non-numeric values are
left out and counted in the details. A statistic that cannot be computed
fails the check.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np
from scipy import stats

from datacheck.analysis.statistics.algorithms import mean, median, quantile, stdev
from datacheck.core.values import non_null, numeric
from datacheck.expectations.models import (
    MeanBetween,
    MedianBetween,
    QuantileEquals,
    StdevBetween,
    ValuesNormal,
)
from datacheck.quality.checks.base import CheckContext, column_not_found
from datacheck.quality.models import ExpectationResult

# Fewest values a normality test is run on
MIN_NORMALITY_SAMPLE = 3


def _numbers(ctx: CheckContext, column: str) -> tuple[list[Any], int]:
    present = non_null(ctx.values(column))
    numbers = numeric(present)
    return numbers, len(present) - len(numbers)


def _check_statistic(
    expectation: MeanBetween | MedianBetween | StdevBetween,
    ctx: CheckContext,
    statistic: Callable[[Sequence[float]], float | None],
    name: str,
) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    numbers, ignored = _numbers(ctx, expectation.column)
    observed = statistic(numbers)
    success = observed is not None and expectation.min <= observed <= expectation.max
    return ExpectationResult.of(
        expectation,
        success,
        **{name: observed},
        sample_size=len(numbers),
        non_numeric_count=ignored,
        min=expectation.min,
        max=expectation.max,
    )


def check_mean_between(expectation: MeanBetween, ctx: CheckContext) -> ExpectationResult:
    return _check_statistic(expectation, ctx, mean, "observed_mean")


def check_median_between(expectation: MedianBetween, ctx: CheckContext) -> ExpectationResult:
    return _check_statistic(expectation, ctx, median, "observed_median")


def check_stdev_between(expectation: StdevBetween, ctx: CheckContext) -> ExpectationResult:
    return _check_statistic(expectation, ctx, stdev, "observed_stdev")


def check_quantile_equals(expectation: QuantileEquals, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    numbers, ignored = _numbers(ctx, expectation.column)
    observed = quantile(numbers, expectation.quantile)
    tolerance = expectation.effective_tolerance
    difference = abs(observed - expectation.expected) if observed is not None else None
    return ExpectationResult.of(
        expectation,
        difference is not None and difference <= tolerance,
        observed_quantile=observed,
        expected=expectation.expected,
        difference=difference,
        tolerance=tolerance,
        sample_size=len(numbers),
        non_numeric_count=ignored,
    )


def check_values_normal(expectation: ValuesNormal, ctx: CheckContext) -> ExpectationResult:
    """KS test of the standardized values against N(0, 1)."""
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    numbers, ignored = _numbers(ctx, expectation.column)
    mu = mean(numbers)
    sigma = stdev(numbers)
    if len(numbers) < MIN_NORMALITY_SAMPLE or mu is None or not sigma:
        return ExpectationResult.of(
            expectation,
            False,
            reason="insufficient data or zero variance",
            sample_size=len(numbers),
            non_numeric_count=ignored,
        )

    standardized = (np.asarray(numbers, dtype=float) - mu) / sigma
    result = stats.kstest(standardized, "norm")
    p_value = float(result.pvalue)
    return ExpectationResult.of(
        expectation,
        p_value > expectation.alpha,
        ks_statistic=float(result.statistic),
        p_value=p_value,
        alpha=expectation.alpha,
        mean=mu,
        stdev=sigma,
        sample_size=len(numbers),
        non_numeric_count=ignored,
    )
