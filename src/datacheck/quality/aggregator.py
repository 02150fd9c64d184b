"""Fold expectation results into a validation result."""

from __future__ import annotations

from collections.abc import Iterable

from datacheck.quality.models import DatasetInfo, ExpectationResult, ValidationResult


def aggregate(
    results: Iterable[ExpectationResult],
    dataset_info: DatasetInfo | None = None,
    short_circuited: bool = False,
) -> ValidationResult:
    """Count met/failed results, preserving their order."""
    ordered = list(results)
    met = sum(1 for r in ordered if r.success)
    failed = len(ordered) - met
    return ValidationResult(
        success=failed == 0,
        results=ordered,
        total_expectations=len(ordered),
        expectations_met=met,
        expectations_failed=failed,
        dataset_info=dataset_info or DatasetInfo(),
        short_circuited=short_circuited,
    )
