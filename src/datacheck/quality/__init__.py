"""Expectation evaluation and result aggregation."""

from datacheck.quality.aggregator import aggregate
from datacheck.quality.evaluator import (
    EvaluationOptions,
    dispatch,
    evaluate,
    validate_or_raise,
)
from datacheck.quality.models import DatasetInfo, ExpectationResult, ValidationResult

__all__ = [
    "DatasetInfo",
    "EvaluationOptions",
    "ExpectationResult",
    "ValidationResult",
    "aggregate",
    "dispatch",
    "evaluate",
    "validate_or_raise",
]
