"""Logical composition of expectations.

Children are evaluated through the same dispatcher as top-level
expectations, so composites nest freely.
"""

from __future__ import annotations

from datacheck.expectations.models import AllOf, AnyOf, AtLeast
from datacheck.quality.checks.base import CheckContext, Dispatcher
from datacheck.quality.models import ExpectationResult


def _children(
    expectation: AllOf | AnyOf | AtLeast, ctx: CheckContext, dispatch: Dispatcher
) -> list[ExpectationResult]:
    return [dispatch(child, ctx) for child in expectation.expectations]


def _summaries(results: list[ExpectationResult]) -> list[dict]:
    return [{"kind": r.kind, "success": r.success, "message": r.message} for r in results]


def check_composite(
    expectation: AllOf | AnyOf | AtLeast, ctx: CheckContext, dispatch: Dispatcher
) -> ExpectationResult:
    results = _children(expectation, ctx, dispatch)
    passed = sum(1 for r in results if r.success)

    match expectation:
        case AllOf():
            required = len(results)
        case AnyOf():
            required = 1
        case AtLeast(min_passing=min_passing):
            required = min_passing

    return ExpectationResult.of(
        expectation,
        passed >= required,
        passed_count=passed,
        failed_count=len(results) - passed,
        required=required,
        results=_summaries(results),
    )
