"""Distribution drift detection against a reference baseline."""

from datacheck.analysis.drift.detector import (
    create_baseline,
    create_column_baseline,
    detect_drift,
    ks_test,
    psi,
)
from datacheck.analysis.drift.models import Baseline, ColumnBaseline, DriftResult

__all__ = [
    "Baseline",
    "ColumnBaseline",
    "DriftResult",
    "create_baseline",
    "create_column_baseline",
    "detect_drift",
    "ks_test",
    "psi",
]
