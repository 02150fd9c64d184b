"""Exception types.

Configuration problems raise. Data problems are reported as failed
expectation results, except where a caller opts into fail-fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datacheck.quality.models import ValidationResult


class ConfigurationError(ValueError):
    """Invalid or missing configuration detected before evaluation."""


class SuiteLoadError(ConfigurationError):
    """Error loading an expectation suite file."""


class ValidationFailedError(Exception):
    """Raised on validation failure when the caller opted into fail-fast.

    Carries the full result for diagnostics.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        failed = result.failed_expectations()
        lines = [f"Validation failed with {len(failed)} failed expectation(s)"]
        lines.extend(f"  - {r.message}" for r in failed)
        super().__init__("\n".join(lines))
