"""datacheck - declarative data-quality validation and profiling.

Usage:
    from datacheck import ColumnExists, ValuesBetween, evaluate, profile

    dataset = [{"age": 25, "name": "Alice"}, {"age": 30, "name": "Bob"}]
    result = evaluate(
        dataset,
        [ColumnExists(column="age"), ValuesBetween(column="age", min=0, max=120)],
    )
    result.success  # True

    profile(dataset).column_count  # 2
"""

from datacheck.analysis.correlation import correlation_matrix, pearson, spearman
from datacheck.analysis.drift import DriftResult, create_baseline, detect_drift
from datacheck.core.errors import ConfigurationError, SuiteLoadError, ValidationFailedError
from datacheck.expectations import (
    ExpectationSuite,
    SuiteOptions,
    load_suite,
    parse_expectation,
    parse_expectations,
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
from datacheck.pipeline.stage import StageOutput, ValidationStage
from datacheck.profiling import ColumnProfile, DatasetProfile, profile, to_json, to_markdown
from datacheck.quality import (
    EvaluationOptions,
    ExpectationResult,
    ValidationResult,
    evaluate,
    validate_or_raise,
)

__version__ = "0.1.0"

__all__ = [
    # Evaluation
    "EvaluationOptions",
    "ExpectationResult",
    "ValidationResult",
    "evaluate",
    "validate_or_raise",
    # Analysis
    "DriftResult",
    "correlation_matrix",
    "create_baseline",
    "detect_drift",
    "pearson",
    "spearman",
    # Profiling
    "ColumnProfile",
    "DatasetProfile",
    "profile",
    "to_json",
    "to_markdown",
    # Pipeline
    "StageOutput",
    "ValidationStage",
    # Errors
    "ConfigurationError",
    "SuiteLoadError",
    "ValidationFailedError",
    # Expectations
    "ExpectationSuite",
    "SuiteOptions",
    "load_suite",
    "parse_expectation",
    "parse_expectations",
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
