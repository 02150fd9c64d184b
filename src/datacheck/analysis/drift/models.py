"""Pydantic models for drift baselines and drift results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ColumnBaseline(BaseModel):
    """Reference distribution of one column.

    Numeric columns keep their values for two-sample KS tests; categorical
    columns keep category frequencies keyed by the category's text form.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["numeric", "categorical"]
    values: list[float] = Field(default_factory=list, description="Numeric reference values")
    mean: float | None = None
    stdev: float | None = None
    frequencies: dict[str, int] = Field(
        default_factory=dict, description="Category -> count (categorical only)"
    )
    total: int = Field(default=0, description="Number of non-null reference values")


Baseline = dict[str, ColumnBaseline]


class DriftResult(BaseModel):
    """Outcome of comparing a dataset against a baseline."""

    model_config = ConfigDict(frozen=True)

    drifted: bool = Field(description="True when any column's score exceeds the threshold")
    columns_drifted: list[str] = Field(default_factory=list)
    drift_scores: dict[str, float | None] = Field(
        default_factory=dict,
        description="KS statistic (numeric) or PSI (categorical); None when not computable",
    )
    method: Literal["auto", "ks", "psi"] = "auto"
    threshold: float

    @classmethod
    def from_scores(
        cls,
        scores: dict[str, float | None],
        threshold: float,
        method: Literal["auto", "ks", "psi"] = "auto",
    ) -> DriftResult:
        drifted_columns = [c for c, s in scores.items() if s is not None and s > threshold]
        return cls(
            drifted=bool(drifted_columns),
            columns_drifted=drifted_columns,
            drift_scores=scores,
            method=method,
            threshold=threshold,
        )
