"""Pipeline stage that validates a dataset found in an execution context.

The context is any mapping. The stage reads the dataset from ``dataset``
(or its alias ``examples``), evaluates its expectations, and returns a new
context with a ``data_validation`` entry added. Other entries pass through
unchanged.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from datacheck.core.errors import ConfigurationError, ValidationFailedError
from datacheck.core.logging import get_logger
from datacheck.core.values import normalize_dataset
from datacheck.expectations.loader import ExpectationSuite, parse_expectations
from datacheck.expectations.models import Expectation
from datacheck.profiling.models import DatasetProfile
from datacheck.profiling.profiler import profile as profile_dataset
from datacheck.quality.evaluator import EvaluationOptions, evaluate
from datacheck.quality.models import ValidationResult

logger = get_logger(__name__)

DATASET_KEYS = ("dataset", "examples")
OUTPUT_KEY = "data_validation"


class StageOutput(BaseModel):
    """What the validation stage merges into the context."""

    model_config = ConfigDict(frozen=True)

    validation_result: ValidationResult
    profile: DatasetProfile | None = Field(
        default=None, description="Dataset profile; None when profiling is disabled"
    )
    passed: bool
    expectations_met: int
    expectations_failed: int
    total_expectations: int


class Stage(ABC):
    """Base class for pipeline stages.

    Subclasses must implement:
    - name property
    - outputs property
    - describe method
    - run method
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this stage."""
        ...

    @property
    @abstractmethod
    def outputs(self) -> list[str]:
        """Context keys this stage produces."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """One-line human-readable description of the configuration."""
        ...

    @abstractmethod
    def run(self, context: Mapping[str, Any]) -> dict[str, Any]:
        """Return a new context with this stage's outputs merged in."""
        ...


class ValidationStage(Stage):
    """Evaluate expectations against the context's dataset.

    Args:
        expectations: Expectations (or mappings with a ``kind``) to evaluate
        fail_fast: Raise ValidationFailedError when validation fails
        profile: Attach a DatasetProfile to the output
        short_circuit: Stop evaluating after the first failed expectation
    """

    def __init__(
        self,
        expectations: Iterable[Expectation | Mapping[str, Any]] | None = None,
        fail_fast: bool = False,
        profile: bool = False,
        short_circuit: bool = False,
    ):
        self.expectations = list(expectations or [])
        self.fail_fast = fail_fast
        self.profile = profile
        self.short_circuit = short_circuit

    @classmethod
    def from_suite(cls, suite: ExpectationSuite, fail_fast: bool = False) -> ValidationStage:
        return cls(
            expectations=suite.expectations,
            fail_fast=fail_fast,
            profile=suite.options.profile,
            short_circuit=suite.options.short_circuit,
        )

    @property
    def name(self) -> str:
        return "data_validation"

    @property
    def outputs(self) -> list[str]:
        return [OUTPUT_KEY]

    def describe(self) -> str:
        text = f"Data validation stage with {len(self.expectations)} expectation(s)"
        modifiers = []
        if self.fail_fast:
            modifiers.append("fail-fast")
        if self.profile:
            modifiers.append("profiling")
        if modifiers:
            text += f" ({', '.join(modifiers)})"
        return text

    @staticmethod
    def extract_dataset(context: Mapping[str, Any]) -> Any:
        """Find the dataset under one of the accepted keys.

        Raises:
            ConfigurationError: If no accepted key is present
        """
        for key in DATASET_KEYS:
            if key in context:
                return context[key]
        raise ConfigurationError(
            f"Stage context must contain a 'dataset' or 'examples' key. "
            f"Got: {sorted(map(str, context))}"
        )

    def run(self, context: Mapping[str, Any]) -> dict[str, Any]:
        """Validate the context's dataset.

        Raises:
            ConfigurationError: If the dataset key is missing or there are no expectations
            ValidationFailedError: If fail_fast is set and validation failed
        """
        start = time.monotonic()
        dataset = self.extract_dataset(context)
        if not self.expectations:
            raise ConfigurationError("Validation stage requires at least one expectation")
        expectations = parse_expectations(self.expectations)

        # One-shot iterables must feed both evaluation and profiling
        records = normalize_dataset(dataset)
        result = evaluate(
            records,
            expectations,
            EvaluationOptions(short_circuit=self.short_circuit),
        )
        if self.fail_fast and not result.success:
            logger.warning(
                "stage_failed",
                stage=self.name,
                expectations_failed=result.expectations_failed,
            )
            raise ValidationFailedError(result)

        output = StageOutput(
            validation_result=result,
            profile=profile_dataset(records) if self.profile else None,
            passed=result.success,
            expectations_met=result.expectations_met,
            expectations_failed=result.expectations_failed,
            total_expectations=result.total_expectations,
        )
        logger.info(
            "stage_completed",
            stage=self.name,
            passed=output.passed,
            profiled=output.profile is not None,
            duration_seconds=round(time.monotonic() - start, 4),
        )
        return {**context, OUTPUT_KEY: output}
