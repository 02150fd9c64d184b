"""Pydantic models for dataset profiles."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from datacheck.analysis.correlation.matrix import CorrelationMatrix
from datacheck.analysis.statistics.outliers import OutlierSummary
from datacheck.core.models.base import InferredType


class ColumnProfile(BaseModel):
    """Descriptive statistics for one column.

    mean/stdev/median are populated only for numeric columns. min/max are
    numeric for numeric columns, lexical for string columns, chronological
    (UTC) for timestamp columns, and None otherwise.
    """

    model_config = ConfigDict(frozen=True)

    inferred_type: InferredType
    null_count: int = Field(description="Records where the column is null or missing")
    unique_count: int = Field(description="Distinct non-null values")
    min: Any = None
    max: Any = None
    mean: float | None = None
    stdev: float | None = Field(default=None, description="Sample standard deviation")
    median: float | None = None
    outliers: OutlierSummary | None = Field(
        default=None, description="Outlier summary (detailed profiles, numeric columns)"
    )


class DatasetProfile(BaseModel):
    """Profile of a whole dataset."""

    model_config = ConfigDict(frozen=True)

    row_count: int
    column_count: int = Field(description="Distinct column names across all records")
    columns: dict[str, ColumnProfile]
    missing_values: dict[str, int] = Field(
        default_factory=dict, description="Column -> null/missing count"
    )
    quality_score: float = Field(
        description="Completeness: non-missing cells / (rows * columns)"
    )
    correlation_matrix: CorrelationMatrix | None = Field(
        default=None, description="Pearson matrix over numeric columns (detailed profiles)"
    )
    profiled_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def numeric_columns(self) -> list[str]:
        return [name for name, col in self.columns.items() if col.inferred_type.is_numeric]
