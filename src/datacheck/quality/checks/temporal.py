"""Timestamp checks. Record order matters for ordering and interval checks."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from datacheck.analysis.temporal.parsing import parse_timestamp
from datacheck.core.values import indexed_non_null
from datacheck.expectations.models import (
    TimestampIntervalsRegular,
    TimestampsChronological,
    TimestampsWithinRange,
    ValidTimestamps,
)
from datacheck.quality.checks.base import CheckContext, column_not_found
from datacheck.quality.models import ExpectationResult


def _parse_column(
    ctx: CheckContext, column: str
) -> tuple[list[tuple[int, datetime]], list[tuple[int, Any]]]:
    """Split non-null values into (index, parsed) and (index, unparseable)."""
    parsed: list[tuple[int, datetime]] = []
    invalid: list[tuple[int, Any]] = []
    for index, value in indexed_non_null(ctx.values(column)):
        stamp = parse_timestamp(value)
        if stamp is None:
            invalid.append((index, value))
        else:
            parsed.append((index, stamp))
    return parsed, invalid


def check_valid_timestamps(expectation: ValidTimestamps, ctx: CheckContext) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    parsed, invalid = _parse_column(ctx, expectation.column)
    return ExpectationResult.of(
        expectation,
        not invalid,
        checked_count=len(parsed) + len(invalid),
        valid_count=len(parsed),
        invalid_count=len(invalid),
        invalid_indices=ctx.examples([i for i, _ in invalid]),
        invalid_examples=ctx.examples([v for _, v in invalid]),
    )


def check_timestamps_chronological(
    expectation: TimestampsChronological, ctx: CheckContext
) -> ExpectationResult:
    """Unparseable values fail the check."""
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    parsed, invalid = _parse_column(ctx, expectation.column)
    violations = []
    for (_, previous), (index, current) in zip(parsed, parsed[1:], strict=False):
        in_order = previous < current if expectation.strict else previous <= current
        if not in_order:
            violations.append(
                {"index": index, "previous": previous.isoformat(), "current": current.isoformat()}
            )

    return ExpectationResult.of(
        expectation,
        not violations and not invalid,
        checked_count=len(parsed),
        strict=expectation.strict,
        violation_count=len(violations),
        violations=ctx.examples(violations),
        invalid_count=len(invalid),
        invalid_examples=ctx.examples([v for _, v in invalid]),
    )


def check_timestamps_within_range(
    expectation: TimestampsWithinRange, ctx: CheckContext
) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    parsed, invalid = _parse_column(ctx, expectation.column)
    out_of_range = [
        (i, ts) for i, ts in parsed if not expectation.min <= ts <= expectation.max
    ]
    return ExpectationResult.of(
        expectation,
        not out_of_range and not invalid,
        checked_count=len(parsed),
        out_of_range_count=len(out_of_range),
        out_of_range_examples=ctx.examples(
            [{"index": i, "value": ts.isoformat()} for i, ts in out_of_range]
        ),
        invalid_count=len(invalid),
        invalid_examples=ctx.examples([v for _, v in invalid]),
    )


def check_timestamp_intervals(
    expectation: TimestampIntervalsRegular, ctx: CheckContext
) -> ExpectationResult:
    """Each gap must be within ``interval * tolerance`` of the expected interval."""
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    parsed, invalid = _parse_column(ctx, expectation.column)
    expected = expectation.interval_seconds
    allowed = expected * expectation.tolerance
    gaps = [
        (index, (current - previous).total_seconds())
        for (_, previous), (index, current) in zip(parsed, parsed[1:], strict=False)
    ]
    irregular = [(i, g) for i, g in gaps if abs(g - expected) > allowed]
    return ExpectationResult.of(
        expectation,
        not irregular and not invalid,
        total_timestamps=len(parsed),
        total_intervals=len(gaps),
        expected_seconds=expected,
        tolerance=expectation.tolerance,
        irregular_count=len(irregular),
        irregular_examples=ctx.examples(
            [{"index": i, "actual_seconds": g, "expected_seconds": expected} for i, g in irregular]
        ),
        invalid_count=len(invalid),
        invalid_examples=ctx.examples([v for _, v in invalid]),
    )
