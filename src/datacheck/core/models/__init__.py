"""Shared models."""

from datacheck.core.models.base import (
    NUMERIC_TYPES,
    InferredType,
    ValueType,
    classify_value,
    is_null,
    is_numeric,
    value_type,
)

__all__ = [
    "NUMERIC_TYPES",
    "InferredType",
    "ValueType",
    "classify_value",
    "is_null",
    "is_numeric",
    "value_type",
]
