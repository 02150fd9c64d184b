"""Per-value checks.

Nulls (and missing keys) are skipped by every check here except the
not-null checks; strictness about nulls is a separate expectation.
"""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Any

from datacheck.core.models.base import NUMERIC_TYPES, ValueType, classify_value, is_null
from datacheck.core.values import hashable, indexed_non_null, non_null
from datacheck.expectations.models import (
    ValueLengthsBetween,
    ValuesBetween,
    ValuesDecreasing,
    ValuesIncreasing,
    ValuesInSet,
    ValuesMatchRegex,
    ValuesNotNull,
    ValuesUnique,
)
from datacheck.quality.checks.base import CheckContext, column_not_found
from datacheck.quality.models import ExpectationResult


def check_values_between(expectation: ValuesBetween, ctx: CheckContext) -> ExpectationResult:
    """Non-numeric values (booleans included) count as failures."""
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    values = ctx.values(expectation.column)
    present = indexed_non_null(values)
    failing: list[int] = []
    numbers: list[Any] = []
    for index, value in present:
        if classify_value(value) not in NUMERIC_TYPES:
            failing.append(index)
            continue
        numbers.append(value)
        if not expectation.min <= value <= expectation.max:
            failing.append(index)

    return ExpectationResult.of(
        expectation,
        not failing,
        checked_count=len(present),
        null_count=len(values) - len(present),
        failing_count=len(failing),
        failing_indices=ctx.examples(failing),
        failing_values=ctx.examples([ctx.dataset[i][expectation.column] for i in failing]),
        observed_min=min(numbers) if numbers else None,
        observed_max=max(numbers) if numbers else None,
    )


def check_values_in_set(expectation: ValuesInSet, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    allowed = {hashable(v) for v in expectation.allowed_values}
    present = indexed_non_null(ctx.values(expectation.column))
    failing = [(i, v) for i, v in present if hashable(v) not in allowed]
    return ExpectationResult.of(
        expectation,
        not failing,
        checked_count=len(present),
        failing_count=len(failing),
        failing_indices=ctx.examples([i for i, _ in failing]),
        failing_values=ctx.examples([v for _, v in failing]),
    )


def check_values_match_regex(expectation: ValuesMatchRegex, ctx: CheckContext) -> ExpectationResult:
    """Non-string values fail."""
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    pattern = re.compile(expectation.pattern)
    present = indexed_non_null(ctx.values(expectation.column))
    failing = [
        (i, v) for i, v in present if not isinstance(v, str) or pattern.search(v) is None
    ]
    return ExpectationResult.of(
        expectation,
        not failing,
        checked_count=len(present),
        failing_count=len(failing),
        failing_indices=ctx.examples([i for i, _ in failing]),
        failing_values=ctx.examples([v for _, v in failing]),
    )


def check_values_not_null(expectation: ValuesNotNull, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    values = ctx.values(expectation.column)
    null_indices = [i for i, v in enumerate(values) if is_null(v)]
    return ExpectationResult.of(
        expectation,
        not null_indices,
        checked_count=len(values),
        null_count=len(null_indices),
        null_indices=ctx.examples(null_indices),
    )


def check_values_unique(expectation: ValuesUnique, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    positions: dict[Any, list[int]] = defaultdict(list)
    first_value: dict[Any, Any] = {}
    for index, value in indexed_non_null(ctx.values(expectation.column)):
        key = hashable(value)
        positions[key].append(index)
        first_value.setdefault(key, value)

    duplicates = {k: idx for k, idx in positions.items() if len(idx) > 1}
    examples = [
        {"value": first_value[k], "count": len(idx), "indices": ctx.examples(idx)}
        for k, idx in duplicates.items()
    ]
    return ExpectationResult.of(
        expectation,
        not duplicates,
        checked_count=sum(len(idx) for idx in positions.values()),
        unique_count=len(positions),
        duplicate_value_count=len(duplicates),
        duplicate_examples=ctx.examples(examples),
    )


def _in_order(previous: Any, current: Any, strict: bool, increasing: bool) -> bool:
    try:
        if increasing:
            return previous < current if strict else previous <= current
        return previous > current if strict else previous >= current
    except TypeError:
        # Incomparable neighbours break the order
        return False


def _check_order(
    expectation: ValuesIncreasing | ValuesDecreasing, ctx: CheckContext, increasing: bool
) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    present = indexed_non_null(ctx.values(expectation.column))
    violations = [
        {"index": cur_i, "previous": prev_v, "current": cur_v}
        for (_, prev_v), (cur_i, cur_v) in zip(present, present[1:], strict=False)
        if not _in_order(prev_v, cur_v, expectation.strict, increasing)
    ]
    return ExpectationResult.of(
        expectation,
        not violations,
        checked_count=len(present),
        violation_count=len(violations),
        violations=ctx.examples(violations),
    )


def check_values_increasing(expectation: ValuesIncreasing, ctx: CheckContext) -> ExpectationResult:
    return _check_order(expectation, ctx, increasing=True)


def check_values_decreasing(expectation: ValuesDecreasing, ctx: CheckContext) -> ExpectationResult:
    return _check_order(expectation, ctx, increasing=False)


def _length(value: Any) -> int | None:
    match classify_value(value):
        case ValueType.STRING | ValueType.LIST:
            return len(value)
        case _:
            return None


def check_value_lengths_between(
    expectation: ValueLengthsBetween, ctx: CheckContext
) -> ExpectationResult:
    """Values without a length (numbers, booleans, ...) fail."""
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    present = non_null(ctx.values(expectation.column))
    lengths = [_length(v) for v in present]
    failing = [
        v
        for v, n in zip(present, lengths, strict=True)
        if n is None or not expectation.min_length <= n <= expectation.max_length
    ]
    measured = [n for n in lengths if n is not None]
    return ExpectationResult.of(
        expectation,
        not failing,
        checked_count=len(present),
        failing_count=len(failing),
        failing_values=ctx.examples(failing),
        observed_min_length=min(measured) if measured else None,
        observed_max_length=max(measured) if measured else None,
    )
