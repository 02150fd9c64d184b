"""Dataset profiler.

Computes per-column descriptive statistics and a dataset summary in one
pass per column. Never raises on data shape: odd values simply do not
contribute to the statistics they cannot take part in.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from datacheck.analysis.correlation.matrix import correlation_matrix
from datacheck.analysis.statistics.algorithms import mean, median, stdev
from datacheck.analysis.statistics.outliers import detect_outliers
from datacheck.analysis.temporal.parsing import to_utc
from datacheck.core.config import get_settings
from datacheck.core.logging import get_logger
from datacheck.core.models.base import InferredType, ValueType, classify_value
from datacheck.core.values import columns, extract, hashable, non_null, normalize_dataset, numeric
from datacheck.profiling.models import ColumnProfile, DatasetProfile
from datacheck.profiling.type_inference import infer_type

logger = get_logger(__name__)


def _timestamps(values: list[Any]) -> list[Any]:
    stamps = []
    for v in values:
        if classify_value(v) is ValueType.TIMESTAMP:
            # date objects compare with each other but not with datetimes
            stamps.append(to_utc(v) if isinstance(v, datetime) else v)
    return stamps


def _bounds(inferred: InferredType, values: list[Any]) -> tuple[Any, Any]:
    match inferred:
        case InferredType.INTEGER | InferredType.FLOAT | InferredType.NUMBER:
            candidates: list[Any] = numeric(values)
        case InferredType.STRING:
            candidates = [v for v in values if isinstance(v, str)]
        case InferredType.TIMESTAMP:
            candidates = _timestamps(values)
        case _:
            return None, None
    try:
        return (min(candidates), max(candidates)) if candidates else (None, None)
    except TypeError:
        # date and datetime mixed in one column
        return None, None


def profile_column(
    values: list[Any],
    detailed: bool = False,
    sample_size: int | None = None,
) -> ColumnProfile:
    """Profile a single column's values (one per record, None for missing)."""
    settings = get_settings()
    present = non_null(values)
    inferred = infer_type(present, sample_size or settings.type_sample_size)
    low, high = _bounds(inferred, present)

    numbers: list[Any] = numeric(present) if inferred.is_numeric else []
    outliers = None
    if detailed and numbers:
        outliers = detect_outliers(
            numbers, method=settings.outlier_method, threshold=settings.zscore_threshold
        )

    return ColumnProfile(
        inferred_type=inferred,
        null_count=len(values) - len(present),
        unique_count=len({hashable(v) for v in present}),
        min=low,
        max=high,
        mean=mean(numbers) if inferred.is_numeric else None,
        stdev=stdev(numbers) if inferred.is_numeric else None,
        median=median(numbers) if inferred.is_numeric else None,
        outliers=outliers,
    )


def _quality_score(row_count: int, missing: Mapping[str, int]) -> float:
    if row_count == 0:
        return 0.0
    if not missing:
        return 1.0
    total_cells = row_count * len(missing)
    return (total_cells - sum(missing.values())) / total_cells


def profile(dataset: Iterable[Mapping[Any, Any]], detailed: bool = False) -> DatasetProfile:
    """Profile a dataset.

    Args:
        dataset: Sequence of records
        detailed: Also compute outlier summaries and a correlation matrix
            over numeric columns

    Returns:
        DatasetProfile with one ColumnProfile per observed column
    """
    start = time.monotonic()
    records = normalize_dataset(dataset)
    names = columns(records)

    column_profiles = {
        name: profile_column(extract(records, name), detailed=detailed) for name in names
    }
    missing = {name: col.null_count for name, col in column_profiles.items()}

    matrix = None
    if detailed:
        numeric_columns = [n for n, c in column_profiles.items() if c.inferred_type.is_numeric]
        matrix = correlation_matrix(records, numeric_columns)

    result = DatasetProfile(
        row_count=len(records),
        column_count=len(names),
        columns=column_profiles,
        missing_values=missing,
        quality_score=_quality_score(len(records), missing),
        correlation_matrix=matrix,
    )
    logger.debug(
        "profile_completed",
        rows=result.row_count,
        columns=result.column_count,
        detailed=detailed,
        duration_seconds=round(time.monotonic() - start, 4),
    )
    return result
