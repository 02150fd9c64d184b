"""Dataset profiling."""

from datacheck.profiling.formatting import to_json, to_markdown
from datacheck.profiling.models import ColumnProfile, DatasetProfile
from datacheck.profiling.profiler import profile, profile_column
from datacheck.profiling.type_inference import infer_type

__all__ = [
    "ColumnProfile",
    "DatasetProfile",
    "infer_type",
    "profile",
    "profile_column",
    "to_json",
    "to_markdown",
]
