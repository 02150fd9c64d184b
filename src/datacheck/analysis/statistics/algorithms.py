"""Descriptive statistics over plain number sequences.

Undefined statistics (empty input, too few points, integers beyond the float
range) come back as None rather than raising, so callers can report "not
computable" as data.

Standard deviation and variance use the sample convention (Bessel's
correction, ddof=1). Every check that bounds a standard deviation goes
through ``stdev`` below.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np


def as_float_array(xs: Sequence[float]) -> np.ndarray | None:
    """Float array of ``xs``, None when an integer is beyond the float range."""
    try:
        return np.asarray(xs, dtype=float)
    except OverflowError:
        return None


def mean(xs: Sequence[float]) -> float | None:
    """Arithmetic mean, None for empty input."""
    arr = as_float_array(xs)
    if arr is None or len(arr) == 0:
        return None
    return float(np.mean(arr))


def variance(xs: Sequence[float]) -> float | None:
    """Sample variance, None for fewer than 2 points."""
    arr = as_float_array(xs)
    if arr is None or len(arr) < 2:
        return None
    # Exact zero for constant input, no floating residue
    if np.all(arr == arr[0]):
        return 0.0
    return float(np.var(arr, ddof=1))


def stdev(xs: Sequence[float]) -> float | None:
    """Sample standard deviation, None for fewer than 2 points."""
    var = variance(xs)
    if var is None:
        return None
    return float(np.sqrt(var))


def median(xs: Sequence[float]) -> float | None:
    arr = as_float_array(xs)
    if arr is None or len(arr) == 0:
        return None
    return float(np.median(arr))


def quantile(xs: Sequence[float], p: float) -> float | None:
    """Quantile with linear interpolation between closest ranks.

    Args:
        xs: Values
        p: Probability in [0, 1]

    Raises:
        ValueError: If p is outside [0, 1]
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Quantile must be between 0 and 1, got {p}")
    arr = as_float_array(xs)
    if arr is None or len(arr) == 0:
        return None
    return float(np.quantile(arr, p, method="linear"))


def minimum(xs: Sequence[float]) -> float | int | None:
    return min(xs) if len(xs) else None


def maximum(xs: Sequence[float]) -> float | int | None:
    return max(xs) if len(xs) else None


@dataclass
class Summary:
    """Descriptive summary of a numeric sequence."""

    count: int
    min: float | int | None
    max: float | int | None
    mean: float | None
    median: float | None
    stdev: float | None
    variance: float | None
    q25: float | None
    q75: float | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summary(xs: Sequence[float]) -> Summary:
    return Summary(
        count=len(xs),
        min=minimum(xs),
        max=maximum(xs),
        mean=mean(xs),
        median=median(xs),
        stdev=stdev(xs),
        variance=variance(xs),
        q25=quantile(xs, 0.25),
        q75=quantile(xs, 0.75),
    )
