"""Expectation variants and suite loading."""

from datacheck.expectations.loader import (
    ExpectationSuite,
    SuiteOptions,
    load_suite,
    parse_expectation,
    parse_expectations,
)
from datacheck.expectations.models import (
    EXPECTATION_TYPES,
    AllOf,
    AnyOf,
    AtLeast,
    BaseExpectation,
    ColumnCountEquals,
    ColumnExists,
    ColumnType,
    Expectation,
    FeatureCorrelation,
    LabelBalance,
    LabelCardinality,
    MatchesFormat,
    MeanBetween,
    MedianBetween,
    NoDataDrift,
    NoMissingValues,
    QuantileEquals,
    RowCountBetween,
    StdevBetween,
    TimestampIntervalsRegular,
    TimestampsChronological,
    TimestampsWithinRange,
    ValidEmails,
    ValidTimestamps,
    ValidUrls,
    ValidUuids,
    ValueLengthsBetween,
    ValuesBetween,
    ValuesDecreasing,
    ValuesIncreasing,
    ValuesInSet,
    ValuesMatchRegex,
    ValuesNormal,
    ValuesNotNull,
    ValuesUnique,
)

__all__ = [
    # Loading
    "ExpectationSuite",
    "SuiteOptions",
    "load_suite",
    "parse_expectation",
    "parse_expectations",
    # Variants
    "EXPECTATION_TYPES",
    "AllOf",
    "AnyOf",
    "AtLeast",
    "BaseExpectation",
    "ColumnCountEquals",
    "ColumnExists",
    "ColumnType",
    "Expectation",
    "FeatureCorrelation",
    "LabelBalance",
    "LabelCardinality",
    "MatchesFormat",
    "MeanBetween",
    "MedianBetween",
    "NoDataDrift",
    "NoMissingValues",
    "QuantileEquals",
    "RowCountBetween",
    "StdevBetween",
    "TimestampIntervalsRegular",
    "TimestampsChronological",
    "TimestampsWithinRange",
    "ValidEmails",
    "ValidTimestamps",
    "ValidUrls",
    "ValidUuids",
    "ValueLengthsBetween",
    "ValuesBetween",
    "ValuesDecreasing",
    "ValuesIncreasing",
    "ValuesInSet",
    "ValuesMatchRegex",
    "ValuesNormal",
    "ValuesNotNull",
    "ValuesUnique",
]
