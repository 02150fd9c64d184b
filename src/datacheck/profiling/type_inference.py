"""Column type inference.

Looks at the first ``sample_size`` non-null values of a column. The column
gets a concrete type only when every sampled value agrees; integers mixed
with floats are ``number``; anything else is ``mixed``. A column without
non-null values is ``unknown``. The rule depends only on record order, so
it is deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from typing import Any

from datacheck.core.models.base import InferredType, ValueType, classify_value

_SINGLE_KIND: dict[ValueType, InferredType] = {
    ValueType.INTEGER: InferredType.INTEGER,
    ValueType.FLOAT: InferredType.FLOAT,
    ValueType.STRING: InferredType.STRING,
    ValueType.BOOLEAN: InferredType.BOOLEAN,
    ValueType.TIMESTAMP: InferredType.TIMESTAMP,
    ValueType.LIST: InferredType.LIST,
    ValueType.MAP: InferredType.MAP,
}


def infer_type(values: Iterable[Any], sample_size: int = 100) -> InferredType:
    kinds = (classify_value(v) for v in values)
    sample = set(islice((k for k in kinds if k is not ValueType.NULL), sample_size))

    if not sample:
        return InferredType.UNKNOWN
    if None in sample:
        return InferredType.MIXED
    if len(sample) == 1:
        return _SINGLE_KIND[sample.pop()]
    if sample == {ValueType.INTEGER, ValueType.FLOAT}:
        return InferredType.NUMBER
    return InferredType.MIXED
