"""Pairwise correlation matrix over dataset columns.

Missing values are handled by pairwise deletion: a row lacking either
column is excluded from that pair only, never from other pairs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import combinations
from typing import Any

from datacheck.analysis.correlation.algorithms import correlate
from datacheck.core.models.base import NUMERIC_TYPES, classify_value

CorrelationMatrix = dict[str, dict[str, float | None]]


def _is_number(value: Any) -> bool:
    return classify_value(value) in NUMERIC_TYPES


def paired_values(
    dataset: Sequence[Mapping[str, Any]], column_a: str, column_b: str
) -> tuple[list[float], list[float]]:
    """Values of two columns from records where both are numeric."""
    xs: list[float] = []
    ys: list[float] = []
    for record in dataset:
        a = record.get(column_a)
        b = record.get(column_b)
        if _is_number(a) and _is_number(b):
            xs.append(a)
            ys.append(b)
    return xs, ys


def correlation_matrix(
    dataset: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    method: str = "pearson",
) -> CorrelationMatrix:
    """Correlation for every pair of ``columns``.

    Each unordered pair is computed once and mirrored, so the matrix is
    symmetric. The diagonal is 1.0 for a column with variance and finite
    values, else None.
    Non-numeric values count as missing.
    """
    ordered = list(dict.fromkeys(columns))
    matrix: CorrelationMatrix = {c: {} for c in ordered}

    for column in ordered:
        xs, ys = paired_values(dataset, column, column)
        matrix[column][column] = correlate(xs, ys, method)

    for a, b in combinations(ordered, 2):
        xs, ys = paired_values(dataset, a, b)
        r = correlate(xs, ys, method)
        matrix[a][b] = r
        matrix[b][a] = r

    return matrix
