"""Pydantic models for expectation and validation results."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from datacheck.expectations.models import Expectation

# =============================================================================
# Single expectation
# =============================================================================


class ExpectationResult(BaseModel):
    """Outcome of evaluating one expectation.

    ``details`` carries check-specific evidence (observed statistic,
    offending indices, examples) for diagnostics only. The model is frozen
    but ``details`` itself is a plain dict; treat it as read-only.
    """

    model_config = ConfigDict(frozen=True)

    expectation: Expectation
    success: bool
    message: str
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def of(cls, expectation: Expectation, success: bool, **details: Any) -> ExpectationResult:
        """Build a result whose message is the expectation's description."""
        return cls(
            expectation=expectation,
            success=success,
            message=expectation.description,
            details=details,
        )

    @property
    def kind(self) -> str:
        return self.expectation.kind


# =============================================================================
# Aggregate
# =============================================================================


class DatasetInfo(BaseModel):
    """Shape of the dataset a validation ran against."""

    model_config = ConfigDict(frozen=True)

    row_count: int = 0
    column_count: int = 0
    columns: list[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Summary of one evaluation call.

    Invariants: met + failed == total == len(results), and success is true
    exactly when nothing failed.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    results: list[ExpectationResult]
    total_expectations: int
    expectations_met: int
    expectations_failed: int
    dataset_info: DatasetInfo = Field(default_factory=DatasetInfo)
    short_circuited: bool = Field(
        default=False, description="Evaluation stopped early after a failure"
    )
    evaluated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def _check_counts(self) -> Self:
        if self.expectations_met + self.expectations_failed != self.total_expectations:
            raise ValueError("expectations_met + expectations_failed must equal total_expectations")
        if self.total_expectations != len(self.results):
            raise ValueError("total_expectations must equal the number of results")
        if self.success != (self.expectations_failed == 0):
            raise ValueError("success must be true exactly when no expectation failed")
        return self

    @property
    def has_failures(self) -> bool:
        return self.expectations_failed > 0

    def failed_expectations(self) -> list[ExpectationResult]:
        return [r for r in self.results if not r.success]

    def passed_expectations(self) -> list[ExpectationResult]:
        return [r for r in self.results if r.success]

    def summary(self) -> str:
        status = "passed" if self.success else "failed"
        return (
            f"Validation {status}: {self.expectations_met}/{self.total_expectations} "
            f"expectations met"
        )
