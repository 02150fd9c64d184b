"""Descriptive statistics and outlier detection."""

from datacheck.analysis.statistics.algorithms import (
    Summary,
    as_float_array,
    maximum,
    mean,
    median,
    minimum,
    quantile,
    stdev,
    summary,
    variance,
)
from datacheck.analysis.statistics.outliers import (
    OutlierSummary,
    detect_iqr,
    detect_outliers,
    detect_zscore,
)

__all__ = [
    "Summary",
    "as_float_array",
    "maximum",
    "mean",
    "median",
    "minimum",
    "quantile",
    "stdev",
    "summary",
    "variance",
    "OutlierSummary",
    "detect_iqr",
    "detect_outliers",
    "detect_zscore",
]
