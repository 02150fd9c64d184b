"""Schema checks: column presence, column types, column count."""

from __future__ import annotations

from collections import Counter

from datacheck.core.models.base import ValueType, classify_value
from datacheck.core.values import indexed_non_null
from datacheck.expectations.models import ColumnCountEquals, ColumnExists, ColumnType
from datacheck.quality.checks.base import CheckContext, column_not_found
from datacheck.quality.models import ExpectationResult

_TYPE_MATCHES: dict[str, frozenset[ValueType]] = {
    "integer": frozenset({ValueType.INTEGER}),
    "float": frozenset({ValueType.FLOAT}),
    "number": frozenset({ValueType.INTEGER, ValueType.FLOAT}),
    "string": frozenset({ValueType.STRING}),
    "boolean": frozenset({ValueType.BOOLEAN}),
    "timestamp": frozenset({ValueType.TIMESTAMP}),
    "list": frozenset({ValueType.LIST}),
    "map": frozenset({ValueType.MAP}),
}


def check_column_exists(expectation: ColumnExists, ctx: CheckContext) -> ExpectationResult:
    """The column must be present in every record; an empty dataset fails."""
    missing = [i for i, record in enumerate(ctx.dataset) if expectation.column not in record]
    success = ctx.row_count > 0 and not missing
    return ExpectationResult.of(
        expectation,
        success,
        column=expectation.column,
        row_count=ctx.row_count,
        records_missing=len(missing),
        missing_indices=ctx.examples(missing),
        available_columns=list(ctx.column_names),
    )


def check_column_type(expectation: ColumnType, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    allowed = _TYPE_MATCHES[expectation.type]
    present = indexed_non_null(ctx.values(expectation.column))
    observed: Counter[str] = Counter()
    mismatches: list[int] = []
    for index, value in present:
        kind = classify_value(value)
        observed[kind.value if kind else type(value).__name__] += 1
        if kind not in allowed:
            mismatches.append(index)

    return ExpectationResult.of(
        expectation,
        not mismatches,
        expected_type=expectation.type,
        checked_count=len(present),
        mismatch_count=len(mismatches),
        mismatch_indices=ctx.examples(mismatches),
        observed_types=dict(observed),
    )


def check_column_count(expectation: ColumnCountEquals, ctx: CheckContext) -> ExpectationResult:
    observed = len(ctx.column_names)
    return ExpectationResult.of(
        expectation,
        observed == expectation.n,
        expected=expectation.n,
        observed=observed,
        columns=list(ctx.column_names),
    )
