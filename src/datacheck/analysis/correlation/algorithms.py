"""Pure numeric correlation algorithms.

Pearson and Spearman coefficients on plain sequences.
No datasets, no nulls - callers filter before calling.

Degenerate inputs (mismatched lengths, fewer than 2 points, zero variance,
infinite values, integers beyond the float range) return None: the
coefficient is undefined, which is not the same as 0.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy import stats

from datacheck.analysis.statistics.algorithms import as_float_array


def _has_variance(arr: np.ndarray) -> bool:
    # Exact comparison: floating residue must not fake a spread
    return not bool(np.all(arr == arr[0]))


def rank(xs: Sequence[float]) -> list[float]:
    """1-based ranks; tied values share the average of their ranks.

    >>> rank([10, 20, 20, 30])
    [1.0, 2.5, 2.5, 4.0]

    Raises:
        ValueError: If a value is beyond the float range
    """
    if len(xs) == 0:
        return []
    arr = as_float_array(xs)
    if arr is None:
        raise ValueError("Cannot rank integers beyond the float range")
    return [float(r) for r in stats.rankdata(arr, method="average")]


def pearson(x: Sequence[float], y: Sequence[float]) -> float | None:
    """Pearson product-moment correlation.

    Numerator and denominator both use raw sums of deviations, so the
    population/sample normalization cancels out.

    Returns:
        Coefficient in [-1, 1], or None when undefined
    """
    if len(x) != len(y) or len(x) < 2:
        return None

    xa = as_float_array(x)
    ya = as_float_array(y)
    if xa is None or ya is None:
        return None
    if not np.all(np.isfinite(xa)) or not np.all(np.isfinite(ya)):
        return None
    if not _has_variance(xa) or not _has_variance(ya):
        return None
    if np.array_equal(xa, ya):
        return 1.0

    dx = xa - xa.mean()
    dy = ya - ya.mean()
    denominator = np.sqrt(np.sum(dx * dx) * np.sum(dy * dy))
    if denominator == 0.0 or not np.isfinite(denominator):
        return None

    r = float(np.sum(dx * dy) / denominator)
    if not np.isfinite(r):
        return None
    return max(-1.0, min(1.0, r))


def spearman(x: Sequence[float], y: Sequence[float]) -> float | None:
    """Spearman rank correlation: Pearson over average ranks."""
    if len(x) != len(y):
        return None
    if as_float_array(x) is None or as_float_array(y) is None:
        return None
    return pearson(rank(x), rank(y))


def correlate(
    x: Sequence[float], y: Sequence[float], method: str = "pearson"
) -> float | None:
    """Dispatch to ``pearson`` or ``spearman`` by name."""
    if method == "spearman":
        return spearman(x, y)
    if method == "pearson":
        return pearson(x, y)
    raise ValueError(f"Unknown correlation method: {method}")
