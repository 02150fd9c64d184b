"""Outlier detection for numeric sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, Field

from datacheck.analysis.statistics.algorithms import mean, quantile, stdev

IQR_MULTIPLIER = 1.5


class OutlierSummary(BaseModel):
    """Outliers found in one column."""

    method: Literal["iqr", "zscore"]
    outlier_count: int = Field(description="Number of values outside the fences")
    outlier_ratio: float = Field(description="outlier_count / number of values")
    lower_bound: float | None = Field(default=None, description="Lower fence (IQR method)")
    upper_bound: float | None = Field(default=None, description="Upper fence (IQR method)")
    threshold: float | None = Field(default=None, description="Z-score threshold")
    outliers: list[float] = Field(default_factory=list)


def detect_iqr(xs: Sequence[float]) -> OutlierSummary:
    """Tukey fences: values beyond Q1 - 1.5*IQR or Q3 + 1.5*IQR."""
    q1 = quantile(xs, 0.25)
    q3 = quantile(xs, 0.75)
    if q1 is None or q3 is None:
        return OutlierSummary(method="iqr", outlier_count=0, outlier_ratio=0.0)

    iqr = q3 - q1
    lower = q1 - IQR_MULTIPLIER * iqr
    upper = q3 + IQR_MULTIPLIER * iqr

    outliers = [float(x) for x in xs if x < lower or x > upper]
    return OutlierSummary(
        method="iqr",
        outlier_count=len(outliers),
        outlier_ratio=len(outliers) / len(xs),
        lower_bound=lower,
        upper_bound=upper,
        outliers=outliers,
    )


def detect_zscore(xs: Sequence[float], threshold: float = 3.0) -> OutlierSummary:
    """Values whose absolute z-score exceeds ``threshold``."""
    mu = mean(xs)
    sigma = stdev(xs)
    if mu is None or not sigma:
        return OutlierSummary(
            method="zscore", outlier_count=0, outlier_ratio=0.0, threshold=threshold
        )

    outliers = [float(x) for x in xs if abs((x - mu) / sigma) > threshold]
    return OutlierSummary(
        method="zscore",
        outlier_count=len(outliers),
        outlier_ratio=len(outliers) / len(xs),
        threshold=threshold,
        outliers=outliers,
    )


def detect_outliers(
    xs: Sequence[float],
    method: Literal["iqr", "zscore"] = "iqr",
    threshold: float = 3.0,
) -> OutlierSummary:
    if method == "zscore":
        return detect_zscore(xs, threshold)
    return detect_iqr(xs)
