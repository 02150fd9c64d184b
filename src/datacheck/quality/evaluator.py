"""Expectation evaluator.

Evaluates an ordered list of expectations against an in-memory dataset:
1. Validate the expectation list (non-empty, well-formed) before any work
2. Normalize the dataset once (string column names)
3. Dispatch each expectation to its check, in input order
4. Fold the results into a ValidationResult

Policies:
---------
- Data problems never raise. Missing columns, wrong value types and empty
  datasets come back as failed ExpectationResults. A check that trips over
  unexpected data (TypeError, ValueError, ArithmeticError) is reported as
  failed with the error in ``details`` and logged.
- Configuration problems always raise ConfigurationError, before evaluation.
- Short-circuit stops after the first failure; the result then covers only
  the evaluated prefix and ``total_expectations`` counts evaluated ones.
- With ``max_workers > 1`` (and no short-circuit) expectations run on a
  thread pool. Results are collected in input order.
"""

from __future__ import annotations

import contextvars
import time
import uuid
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from pydantic import BaseModel, Field

from datacheck.core.config import get_settings
from datacheck.core.errors import ValidationFailedError
from datacheck.core.logging import (
    end_evaluation_metrics,
    get_logger,
    log_context,
    record_evaluation_error,
    record_operation_timing,
    start_evaluation_metrics,
)
from datacheck.core.values import normalize_dataset
from datacheck.expectations.loader import parse_expectations
from datacheck.expectations.models import (
    AllOf,
    AnyOf,
    AtLeast,
    ColumnCountEquals,
    ColumnExists,
    ColumnType,
    Expectation,
    FeatureCorrelation,
    LabelBalance,
    LabelCardinality,
    MatchesFormat,
    MeanBetween,
    MedianBetween,
    NoDataDrift,
    NoMissingValues,
    QuantileEquals,
    RowCountBetween,
    StdevBetween,
    TimestampIntervalsRegular,
    TimestampsChronological,
    TimestampsWithinRange,
    ValidEmails,
    ValidTimestamps,
    ValidUrls,
    ValidUuids,
    ValueLengthsBetween,
    ValuesBetween,
    ValuesDecreasing,
    ValuesIncreasing,
    ValuesInSet,
    ValuesMatchRegex,
    ValuesNormal,
    ValuesNotNull,
    ValuesUnique,
)
from datacheck.quality.aggregator import aggregate
from datacheck.quality.checks import composite, ml, schema, statistical, strings, temporal, values
from datacheck.quality.checks.base import CheckContext
from datacheck.quality.models import DatasetInfo, ExpectationResult, ValidationResult

logger = get_logger(__name__)


class EvaluationOptions(BaseModel):
    """Options for one evaluation call."""

    short_circuit: bool = Field(default=False, description="Stop after the first failure")
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker threads; None uses settings.max_workers",
    )
    max_examples: int | None = Field(
        default=None,
        ge=0,
        description="Examples kept in result details; None uses settings.max_examples",
    )


def dispatch(expectation: Expectation, ctx: CheckContext) -> ExpectationResult:
    """Run the check matching the expectation's kind."""
    match expectation:
        # Schema
        case ColumnExists():
            return schema.check_column_exists(expectation, ctx)
        case ColumnType():
            return schema.check_column_type(expectation, ctx)
        case ColumnCountEquals():
            return schema.check_column_count(expectation, ctx)
        # Values
        case ValuesBetween():
            return values.check_values_between(expectation, ctx)
        case ValuesInSet():
            return values.check_values_in_set(expectation, ctx)
        case ValuesMatchRegex():
            return values.check_values_match_regex(expectation, ctx)
        case ValuesNotNull():
            return values.check_values_not_null(expectation, ctx)
        case ValuesUnique():
            return values.check_values_unique(expectation, ctx)
        case ValuesIncreasing():
            return values.check_values_increasing(expectation, ctx)
        case ValuesDecreasing():
            return values.check_values_decreasing(expectation, ctx)
        case ValueLengthsBetween():
            return values.check_value_lengths_between(expectation, ctx)
        # Statistical
        case MeanBetween():
            return statistical.check_mean_between(expectation, ctx)
        case MedianBetween():
            return statistical.check_median_between(expectation, ctx)
        case StdevBetween():
            return statistical.check_stdev_between(expectation, ctx)
        case QuantileEquals():
            return statistical.check_quantile_equals(expectation, ctx)
        case ValuesNormal():
            return statistical.check_values_normal(expectation, ctx)
        # Dataset / ML
        case RowCountBetween():
            return ml.check_row_count(expectation, ctx)
        case NoMissingValues():
            return ml.check_no_missing_values(expectation, ctx)
        case LabelBalance():
            return ml.check_label_balance(expectation, ctx)
        case LabelCardinality():
            return ml.check_label_cardinality(expectation, ctx)
        case FeatureCorrelation():
            return ml.check_feature_correlation(expectation, ctx)
        case NoDataDrift():
            return ml.check_no_data_drift(expectation, ctx)
        # Strings
        case ValidEmails():
            return strings.check_valid_emails(expectation, ctx)
        case ValidUrls():
            return strings.check_valid_urls(expectation, ctx)
        case ValidUuids():
            return strings.check_valid_uuids(expectation, ctx)
        case MatchesFormat():
            return strings.check_matches_format(expectation, ctx)
        # Temporal
        case ValidTimestamps():
            return temporal.check_valid_timestamps(expectation, ctx)
        case TimestampsChronological():
            return temporal.check_timestamps_chronological(expectation, ctx)
        case TimestampsWithinRange():
            return temporal.check_timestamps_within_range(expectation, ctx)
        case TimestampIntervalsRegular():
            return temporal.check_timestamp_intervals(expectation, ctx)
        # Composite
        case AllOf() | AnyOf() | AtLeast():
            return composite.check_composite(expectation, ctx, _evaluate_one)
        case _:
            raise TypeError(f"Unsupported expectation: {type(expectation).__name__}")


def _evaluate_one(expectation: Expectation, ctx: CheckContext) -> ExpectationResult:
    """Dispatch one expectation, turning check errors into a failed result."""
    start = time.monotonic()
    try:
        result = dispatch(expectation, ctx)
    except (TypeError, ValueError, ArithmeticError) as e:
        logger.warning(
            "expectation_error",
            kind=expectation.kind,
            error=str(e),
            error_type=type(e).__name__,
        )
        record_evaluation_error(f"{expectation.kind}: {e}")
        result = ExpectationResult(
            expectation=expectation,
            success=False,
            message=f"{expectation.description}: evaluation error: {e}",
            details={"error": str(e), "error_type": type(e).__name__},
        )
    record_operation_timing(expectation.kind, time.monotonic() - start)
    logger.debug("expectation_evaluated", kind=expectation.kind, success=result.success)
    return result


def _run_sequential(
    expectations: Sequence[Expectation], ctx: CheckContext, short_circuit: bool
) -> tuple[list[ExpectationResult], bool]:
    results: list[ExpectationResult] = []
    for expectation in expectations:
        result = _evaluate_one(expectation, ctx)
        results.append(result)
        if short_circuit and not result.success:
            return results, len(results) < len(expectations)
    return results, False


def _run_parallel(
    expectations: Sequence[Expectation], ctx: CheckContext, max_workers: int
) -> list[ExpectationResult]:
    # Each task runs in a copy of the caller's context so metrics and log
    # context reach the worker threads
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [
            pool.submit(contextvars.copy_context().run, _evaluate_one, expectation, ctx)
            for expectation in expectations
        ]
        return [future.result() for future in futures]


def evaluate(
    dataset: Iterable[Mapping[Any, Any]],
    expectations: Iterable[Expectation | Mapping[str, Any]] | None,
    options: EvaluationOptions | None = None,
) -> ValidationResult:
    """Evaluate expectations against a dataset.

    Args:
        dataset: Sequence of records (mappings of column name -> value)
        expectations: Non-empty ordered expectations; mappings with a
            ``kind`` key are parsed into expectation variants
        options: Evaluation options (short-circuit, parallelism)

    Returns:
        ValidationResult with one ExpectationResult per evaluated expectation

    Raises:
        ConfigurationError: If expectations are missing, empty or malformed,
            or the dataset is not a sequence of mappings
    """
    parsed = parse_expectations(expectations)
    options = options or EvaluationOptions()
    settings = get_settings()
    records = normalize_dataset(dataset)

    max_examples = options.max_examples
    if max_examples is None:
        max_examples = settings.max_examples
    max_workers = options.max_workers or settings.max_workers
    ctx = CheckContext.build(records, max_examples=max_examples)

    evaluation_id = uuid.uuid4().hex[:12]
    with log_context(evaluation_id=evaluation_id):
        start_evaluation_metrics(evaluation_id, rows=len(records))
        logger.info(
            "evaluation_started",
            expectations=len(parsed),
            rows=len(records),
            short_circuit=options.short_circuit,
        )

        short_circuited = False
        if max_workers > 1 and not options.short_circuit and len(parsed) > 1:
            results = _run_parallel(parsed, ctx, max_workers)
        else:
            results, short_circuited = _run_sequential(parsed, ctx, options.short_circuit)

        validation = aggregate(
            results,
            dataset_info=DatasetInfo(
                row_count=ctx.row_count,
                column_count=len(ctx.column_names),
                columns=list(ctx.column_names),
            ),
            short_circuited=short_circuited,
        )

        metrics = end_evaluation_metrics()
        logger.info(
            "evaluation_completed",
            success=validation.success,
            expectations_met=validation.expectations_met,
            expectations_failed=validation.expectations_failed,
            short_circuited=short_circuited,
            slowest=metrics.get_slowest_operations(3) if metrics else [],
            metrics=metrics.to_dict() if metrics else None,
        )
    return validation


def validate_or_raise(
    dataset: Iterable[Mapping[Any, Any]],
    expectations: Iterable[Expectation | Mapping[str, Any]] | None,
    options: EvaluationOptions | None = None,
) -> ValidationResult:
    """Evaluate and raise ValidationFailedError when any expectation fails.

    Raises:
        ConfigurationError: As for ``evaluate``
        ValidationFailedError: Carrying the full ValidationResult
    """
    result = evaluate(dataset, expectations, options)
    if not result.success:
        raise ValidationFailedError(result)
    return result
