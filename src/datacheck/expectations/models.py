"""Expectation variants.

Every expectation kind is an immutable pydantic model tagged by ``kind``.
``Expectation`` is the discriminated union of all of them, so mappings
(e.g. loaded from YAML) parse into the right variant and the evaluator can
dispatch with one exhaustive ``match``.

Parameters are validated at construction: an expectation that exists is
well-formed, and bad parameters raise ``pydantic.ValidationError``.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from datacheck.analysis.drift.models import ColumnBaseline
from datacheck.analysis.temporal.parsing import INTERVAL_UNITS, to_utc
from datacheck.core.values import normalize_key

ColumnName = Annotated[str, Field(min_length=1, description="Column name")]
TypeName = Literal["integer", "float", "number", "string", "boolean", "timestamp", "list", "map"]
FormatName = Literal["us_phone", "iso_date", "iso_datetime", "ip_address", "hex_color"]
IntervalUnit = Literal["second", "minute", "hour", "day"]

# =============================================================================
# Bases
# =============================================================================


class BaseExpectation(BaseModel):
    """Common configuration for all expectation variants."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kind: str

    @property
    def description(self) -> str:
        return self.kind.replace("_", " ")


class ColumnExpectation(BaseExpectation):
    """Expectation scoped to a single column."""

    column: ColumnName

    @field_validator("column", mode="before")
    @classmethod
    def _normalize_column(cls, value: Any) -> Any:
        return normalize_key(value) if value is not None else value


class BoundedColumnExpectation(ColumnExpectation):
    """Column expectation with an inclusive numeric [min, max] range."""

    min: float
    max: float

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")
        return self


# =============================================================================
# Schema
# =============================================================================


class ColumnExists(ColumnExpectation):
    """Every record carries the column key (the value may be null)."""

    kind: Literal["column_exists"] = "column_exists"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} to exist"


class ColumnType(ColumnExpectation):
    """All non-null values have the declared type.

    ``number`` accepts integers and floats; ``float`` accepts floats only.
    """

    kind: Literal["column_type"] = "column_type"
    type: TypeName

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} to be of type {self.type}"


class ColumnCountEquals(BaseExpectation):
    kind: Literal["column_count_equals"] = "column_count_equals"
    n: int = Field(ge=0, description="Expected number of distinct columns")

    @property
    def description(self) -> str:
        return f"expect column count to equal {self.n}"


# =============================================================================
# Values
# =============================================================================


class ValuesBetween(BoundedColumnExpectation):
    """Non-null values lie in [min, max]. Nulls are skipped."""

    kind: Literal["values_between"] = "values_between"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to be between {self.min} and {self.max}"


class ValuesInSet(ColumnExpectation):
    kind: Literal["values_in_set"] = "values_in_set"
    allowed_values: tuple[Any, ...] = Field(min_length=1)

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to be in {list(self.allowed_values)!r}"


class ValuesMatchRegex(ColumnExpectation):
    kind: Literal["values_match_regex"] = "values_match_regex"
    pattern: str = Field(min_length=1)

    @field_validator("pattern")
    @classmethod
    def _compile(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern {value!r}: {e}") from e
        return value

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to match regex {self.pattern!r}"


class ValuesNotNull(ColumnExpectation):
    """No record has a null or missing value."""

    kind: Literal["values_not_null"] = "values_not_null"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to not be null"


class NoMissingValues(ColumnExpectation):
    """Same check as ValuesNotNull, reported as a completeness ratio."""

    kind: Literal["no_missing_values"] = "no_missing_values"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} to have no missing values"


class ValuesUnique(ColumnExpectation):
    kind: Literal["values_unique"] = "values_unique"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to be unique"


class ValuesIncreasing(ColumnExpectation):
    kind: Literal["values_increasing"] = "values_increasing"
    strict: bool = True

    @property
    def description(self) -> str:
        qualifier = "strictly " if self.strict else ""
        return f"expect column {self.column!r} values to be {qualifier}increasing"


class ValuesDecreasing(ColumnExpectation):
    kind: Literal["values_decreasing"] = "values_decreasing"
    strict: bool = True

    @property
    def description(self) -> str:
        qualifier = "strictly " if self.strict else ""
        return f"expect column {self.column!r} values to be {qualifier}decreasing"


class ValueLengthsBetween(ColumnExpectation):
    """Length of every non-null string or list value lies in [min_length, max_length]."""

    kind: Literal["value_lengths_between"] = "value_lengths_between"
    min_length: int = Field(ge=0)
    max_length: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must be <= max_length ({self.max_length})"
            )
        return self

    @property
    def description(self) -> str:
        return (
            f"expect column {self.column!r} value lengths to be between "
            f"{self.min_length} and {self.max_length}"
        )


# =============================================================================
# Statistical
# =============================================================================


class MeanBetween(BoundedColumnExpectation):
    kind: Literal["mean_between"] = "mean_between"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} mean to be between {self.min} and {self.max}"


class MedianBetween(BoundedColumnExpectation):
    kind: Literal["median_between"] = "median_between"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} median to be between {self.min} and {self.max}"


class StdevBetween(BoundedColumnExpectation):
    """Sample standard deviation lies in [min, max]."""

    kind: Literal["stdev_between"] = "stdev_between"

    @model_validator(mode="after")
    def _check_non_negative(self) -> Self:
        if self.min < 0:
            raise ValueError("Standard deviation bounds must be non-negative")
        return self

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} stdev to be between {self.min} and {self.max}"


class QuantileEquals(ColumnExpectation):
    """Quantile is within ``tolerance`` of ``expected``.

    Tolerance defaults to 5% of ``abs(expected)``.
    """

    kind: Literal["quantile_equals"] = "quantile_equals"
    quantile: float = Field(ge=0.0, le=1.0)
    expected: float
    tolerance: float | None = Field(default=None, ge=0.0)

    @property
    def effective_tolerance(self) -> float:
        if self.tolerance is not None:
            return self.tolerance
        return abs(self.expected) * 0.05

    @property
    def description(self) -> str:
        return (
            f"expect column {self.column!r} quantile {self.quantile} to be "
            f"{self.expected} (+/- {self.effective_tolerance})"
        )


class ValuesNormal(ColumnExpectation):
    """One-sample KS test against a normal fitted to the data does not reject at ``alpha``."""

    kind: Literal["values_normal"] = "values_normal"
    alpha: float = Field(default=0.05, gt=0.0, lt=1.0)

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to be normally distributed"


# =============================================================================
# Dataset / ML
# =============================================================================


class RowCountBetween(BaseExpectation):
    kind: Literal["row_count_between"] = "row_count_between"
    min: int = Field(ge=0)
    max: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")
        return self

    @property
    def description(self) -> str:
        return f"expect row count to be between {self.min} and {self.max}"


class LabelBalance(ColumnExpectation):
    """Every distinct label's frequency divided by the row count is at least ``min_ratio``."""

    kind: Literal["label_balance"] = "label_balance"
    min_ratio: float = Field(default=0.1, gt=0.0, le=1.0)

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} label balance >= {self.min_ratio}"


class LabelCardinality(ColumnExpectation):
    kind: Literal["label_cardinality"] = "label_cardinality"
    min: int = Field(default=2, ge=0)
    max: int = Field(default=100, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")
        return self

    @property
    def description(self) -> str:
        return (
            f"expect column {self.column!r} label cardinality between {self.min} and {self.max}"
        )


class FeatureCorrelation(BaseExpectation):
    """Absolute correlation between two columns lies within bounds."""

    kind: Literal["feature_correlation"] = "feature_correlation"
    column_a: ColumnName
    column_b: ColumnName
    min: float | None = Field(default=None, ge=0.0, le=1.0)
    max: float = Field(default=0.95, ge=0.0, le=1.0)
    method: Literal["pearson", "spearman"] = "pearson"

    @field_validator("column_a", "column_b", mode="before")
    @classmethod
    def _normalize_columns(cls, value: Any) -> Any:
        return normalize_key(value) if value is not None else value

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")
        return self

    @property
    def description(self) -> str:
        bounds = f"<= {self.max}" if self.min is None else f"between {self.min} and {self.max}"
        return (
            f"expect correlation between {self.column_a!r} and {self.column_b!r} to be {bounds}"
        )


class NoDataDrift(ColumnExpectation):
    """Drift score against a baseline column stays at or below ``threshold``."""

    kind: Literal["no_data_drift"] = "no_data_drift"
    baseline: ColumnBaseline
    threshold: float = Field(default=0.05, gt=0.0)

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} to show no drift (threshold {self.threshold})"


# =============================================================================
# Strings
# =============================================================================


class ValidEmails(ColumnExpectation):
    kind: Literal["valid_emails"] = "valid_emails"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to be valid emails"


class ValidUrls(ColumnExpectation):
    kind: Literal["valid_urls"] = "valid_urls"
    schemes: tuple[str, ...] = Field(default=("http", "https"), min_length=1)
    require_tld: bool = True

    @field_validator("schemes")
    @classmethod
    def _lowercase(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(s.lower() for s in value)

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to be valid URLs ({', '.join(self.schemes)})"


class ValidUuids(ColumnExpectation):
    kind: Literal["valid_uuids"] = "valid_uuids"
    version: int | None = Field(default=None, ge=1, le=5)

    @property
    def description(self) -> str:
        suffix = f" (version {self.version})" if self.version else ""
        return f"expect column {self.column!r} values to be valid UUIDs{suffix}"


class MatchesFormat(ColumnExpectation):
    kind: Literal["matches_format"] = "matches_format"
    format: FormatName

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to match format {self.format}"


# =============================================================================
# Temporal
# =============================================================================


class ValidTimestamps(ColumnExpectation):
    kind: Literal["valid_timestamps"] = "valid_timestamps"

    @property
    def description(self) -> str:
        return f"expect column {self.column!r} values to be valid timestamps"


class TimestampsChronological(ColumnExpectation):
    """Non-null timestamps are non-decreasing (or increasing when ``strict``) in record order."""

    kind: Literal["timestamps_chronological"] = "timestamps_chronological"
    strict: bool = False

    @property
    def description(self) -> str:
        qualifier = "strictly " if self.strict else ""
        return f"expect column {self.column!r} timestamps to be {qualifier}chronological"


class TimestampsWithinRange(ColumnExpectation):
    kind: Literal["timestamps_within_range"] = "timestamps_within_range"
    min: datetime
    max: datetime

    @field_validator("min", "max")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return to_utc(value)

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")
        return self

    @property
    def description(self) -> str:
        return (
            f"expect column {self.column!r} timestamps to be within "
            f"{self.min.isoformat()} and {self.max.isoformat()}"
        )


class TimestampIntervalsRegular(ColumnExpectation):
    """Gaps between consecutive timestamps equal the interval within a relative tolerance."""

    kind: Literal["timestamp_intervals_regular"] = "timestamp_intervals_regular"
    interval: float = Field(gt=0)
    unit: IntervalUnit = "second"
    tolerance: float = Field(default=0.05, ge=0.0)

    @property
    def interval_seconds(self) -> float:
        return self.interval * INTERVAL_UNITS[self.unit]

    @property
    def description(self) -> str:
        return (
            f"expect column {self.column!r} timestamp intervals to be regular "
            f"({self.interval:g} {self.unit}, tolerance: {self.tolerance})"
        )


# =============================================================================
# Composite
# =============================================================================


class AllOf(BaseExpectation):
    kind: Literal["all_of"] = "all_of"
    expectations: tuple[Expectation, ...] = Field(min_length=1)

    @property
    def description(self) -> str:
        return f"expect all {len(self.expectations)} expectations to pass"


class AnyOf(BaseExpectation):
    kind: Literal["any_of"] = "any_of"
    expectations: tuple[Expectation, ...] = Field(min_length=1)

    @property
    def description(self) -> str:
        return f"expect any of {len(self.expectations)} expectations to pass"


class AtLeast(BaseExpectation):
    kind: Literal["at_least"] = "at_least"
    min_passing: int = Field(ge=1)
    expectations: tuple[Expectation, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_min_passing(self) -> Self:
        if self.min_passing > len(self.expectations):
            raise ValueError(
                f"min_passing ({self.min_passing}) exceeds the number of "
                f"expectations ({len(self.expectations)})"
            )
        return self

    @property
    def description(self) -> str:
        return (
            f"expect at least {self.min_passing} of {len(self.expectations)} expectations to pass"
        )


Expectation = Annotated[
    ColumnExists
    | ColumnType
    | ColumnCountEquals
    | ValuesBetween
    | ValuesInSet
    | ValuesMatchRegex
    | ValuesNotNull
    | NoMissingValues
    | ValuesUnique
    | ValuesIncreasing
    | ValuesDecreasing
    | ValueLengthsBetween
    | MeanBetween
    | MedianBetween
    | StdevBetween
    | QuantileEquals
    | ValuesNormal
    | RowCountBetween
    | LabelBalance
    | LabelCardinality
    | FeatureCorrelation
    | NoDataDrift
    | ValidEmails
    | ValidUrls
    | ValidUuids
    | MatchesFormat
    | ValidTimestamps
    | TimestampsChronological
    | TimestampsWithinRange
    | TimestampIntervalsRegular
    | AllOf
    | AnyOf
    | AtLeast,
    Field(discriminator="kind"),
]

for _model in (AllOf, AnyOf, AtLeast):
    _model.model_rebuild()

EXPECTATION_TYPES: tuple[type[BaseExpectation], ...] = (
    ColumnExists,
    ColumnType,
    ColumnCountEquals,
    ValuesBetween,
    ValuesInSet,
    ValuesMatchRegex,
    ValuesNotNull,
    NoMissingValues,
    ValuesUnique,
    ValuesIncreasing,
    ValuesDecreasing,
    ValueLengthsBetween,
    MeanBetween,
    MedianBetween,
    StdevBetween,
    QuantileEquals,
    ValuesNormal,
    RowCountBetween,
    LabelBalance,
    LabelCardinality,
    FeatureCorrelation,
    NoDataDrift,
    ValidEmails,
    ValidUrls,
    ValidUuids,
    MatchesFormat,
    ValidTimestamps,
    TimestampsChronological,
    TimestampsWithinRange,
    TimestampIntervalsRegular,
    AllOf,
    AnyOf,
    AtLeast,
)
