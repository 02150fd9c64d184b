"""Correlation algorithms and pairwise matrices."""

from datacheck.analysis.correlation.algorithms import correlate, pearson, rank, spearman
from datacheck.analysis.correlation.matrix import (
    CorrelationMatrix,
    correlation_matrix,
    paired_values,
)

__all__ = [
    "CorrelationMatrix",
    "correlate",
    "correlation_matrix",
    "paired_values",
    "pearson",
    "rank",
    "spearman",
]
