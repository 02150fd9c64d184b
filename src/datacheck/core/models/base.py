"""Base value types shared by every module.

Record values are classified into a closed set of kinds once, so checks and
the profiler can dispatch exhaustively instead of probing types ad hoc.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

import numpy as np


class ValueType(str, Enum):
    """Kind of a single record value."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    TIMESTAMP = "timestamp"
    LIST = "list"
    MAP = "map"


class InferredType(str, Enum):
    """Column type reported by the profiler."""

    INTEGER = "integer"
    FLOAT = "float"
    NUMBER = "number"  # integers and floats mixed
    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    LIST = "list"
    MAP = "map"
    MIXED = "mixed"
    UNKNOWN = "unknown"  # no non-null values

    @property
    def is_numeric(self) -> bool:
        return self in (InferredType.INTEGER, InferredType.FLOAT, InferredType.NUMBER)


NUMERIC_TYPES = frozenset({ValueType.INTEGER, ValueType.FLOAT})


def classify_value(value: Any) -> ValueType | None:
    """Classify a value, returning None for anything outside the value model."""
    match value:
        case None:
            return ValueType.NULL
        # bool before int: Python booleans are integers
        case bool() | np.bool_():
            return ValueType.BOOLEAN
        case int() | np.integer():
            return ValueType.INTEGER
        case float() | np.floating():
            return ValueType.NULL if math.isnan(value) else ValueType.FLOAT
        case str():
            return ValueType.STRING
        case datetime() | date():
            return ValueType.TIMESTAMP
        case list() | tuple():
            return ValueType.LIST
        case Mapping():
            return ValueType.MAP
        case _:
            return None


def value_type(value: Any) -> ValueType:
    """Classify a value, raising TypeError for unsupported values."""
    kind = classify_value(value)
    if kind is None:
        raise TypeError(f"Unsupported value type: {type(value).__name__}")
    return kind


def is_null(value: Any) -> bool:
    return classify_value(value) is ValueType.NULL


def is_numeric(value: Any) -> bool:
    return classify_value(value) in NUMERIC_TYPES
