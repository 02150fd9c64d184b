"""Dataset boundary helpers.

A dataset is an ordered sequence of records. Column names are normalized to
strings here, once, so the rest of the package only deals with ``str`` keys.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from datacheck.core.errors import ConfigurationError
from datacheck.core.models.base import ValueType, classify_value

Record = dict[str, Any]
Dataset = list[Record]


def normalize_key(key: Any) -> str:
    """Canonical column name for a record key."""
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def normalize_dataset(dataset: Iterable[Mapping[Any, Any]] | None) -> Dataset:
    """Copy a dataset into records keyed by string column names.

    Raises:
        ConfigurationError: If the dataset or one of its records is not a mapping
    """
    if dataset is None:
        raise ConfigurationError("Dataset is required")
    if isinstance(dataset, Mapping | str | bytes):
        raise ConfigurationError("Dataset must be a sequence of records, got a single object")

    records: Dataset = []
    for index, record in enumerate(dataset):
        if not isinstance(record, Mapping):
            raise ConfigurationError(
                f"Record {index} is not a mapping (got {type(record).__name__})"
            )
        records.append({normalize_key(k): v for k, v in record.items()})
    return records


def columns(dataset: Sequence[Mapping[str, Any]]) -> list[str]:
    """Union of column names across all records, in first-seen order."""
    seen: dict[str, None] = {}
    for record in dataset:
        for key in record:
            seen.setdefault(key, None)
    return list(seen)


def column_present(dataset: Sequence[Mapping[str, Any]], column: str) -> bool:
    return any(column in record for record in dataset)


def extract(dataset: Sequence[Mapping[str, Any]], column: str) -> list[Any]:
    """One value per record; missing keys read as None."""
    return [record.get(column) for record in dataset]


def non_null(values: Iterable[Any]) -> list[Any]:
    return [v for v in values if classify_value(v) is not ValueType.NULL]


def indexed_non_null(values: Iterable[Any]) -> list[tuple[int, Any]]:
    """Non-null values paired with their record index."""
    return [(i, v) for i, v in enumerate(values) if classify_value(v) is not ValueType.NULL]


def numeric(values: Iterable[Any]) -> list[float | int]:
    """Integer and float values only; booleans and nulls are dropped."""
    return [v for v in values if classify_value(v) in (ValueType.INTEGER, ValueType.FLOAT)]


def hashable(value: Any) -> Any:
    """Hashable stand-in for a value, used for distinct counts and frequencies.

    Integers and equal floats collapse (1 == 1.0) as Python equality does;
    booleans are tagged so True never collides with 1.
    """
    match classify_value(value):
        case ValueType.BOOLEAN:
            return ("__bool__", bool(value))
        case ValueType.LIST:
            return ("__list__", tuple(hashable(v) for v in value))
        case ValueType.MAP:
            items = ((str(k), hashable(v)) for k, v in value.items())
            return ("__map__", tuple(sorted(items, key=lambda kv: kv[0])))
        case _:
            try:
                hash(value)
            except TypeError:
                return ("__repr__", repr(value))
            return value
