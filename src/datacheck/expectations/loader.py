"""YAML loader for expectation suites.

A suite file looks like::

    name: customers
    description: Nightly customer export
    options:
      short_circuit: false
    expectations:
      - kind: column_exists
        column: customer_id
      - kind: values_between
        column: age
        min: 0
        max: 120

Suites are only loaded and validated here, never evaluated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from datacheck.core.config import get_settings
from datacheck.core.errors import ConfigurationError, SuiteLoadError
from datacheck.core.logging import get_logger
from datacheck.expectations.models import EXPECTATION_TYPES, Expectation

logger = get_logger(__name__)

_EXPECTATION_ADAPTER: TypeAdapter[Expectation] = TypeAdapter(Expectation)


class SuiteOptions(BaseModel):
    """Evaluation options stored alongside a suite."""

    short_circuit: bool = Field(default=False, description="Stop after the first failure")
    profile: bool = Field(default=False, description="Attach a dataset profile")


class ExpectationSuite(BaseModel):
    """A named, ordered list of expectations."""

    name: str = "default"
    description: str | None = None
    options: SuiteOptions = Field(default_factory=SuiteOptions)
    expectations: list[Expectation] = Field(min_length=1)


def parse_expectation(item: Any) -> Expectation:
    """Coerce an expectation instance or mapping into an expectation.

    Raises:
        ConfigurationError: If the item is neither, or its parameters are invalid
    """
    if isinstance(item, EXPECTATION_TYPES):
        return item
    if not isinstance(item, Mapping):
        raise ConfigurationError(
            f"Expected an expectation or a mapping with a 'kind', got {type(item).__name__}"
        )
    try:
        return _EXPECTATION_ADAPTER.validate_python(dict(item))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid expectation {dict(item)!r}: {e}") from e


def parse_expectations(items: Iterable[Any] | None) -> list[Expectation]:
    """Coerce a non-empty sequence of expectations.

    Raises:
        ConfigurationError: If the sequence is absent or empty, or an item is invalid
    """
    if items is None:
        raise ConfigurationError("Validation requires at least one expectation, got none")
    if isinstance(items, Mapping | str | bytes) or isinstance(items, EXPECTATION_TYPES):
        raise ConfigurationError("Expectations must be given as a sequence")
    parsed = [parse_expectation(item) for item in items]
    if not parsed:
        raise ConfigurationError("Validation requires at least one expectation, got an empty list")
    return parsed


def load_suite(path: Path | str) -> ExpectationSuite:
    """Load an expectation suite from a YAML file.

    Relative paths that do not exist are also looked up under
    ``settings.config_path / "suites"``.

    Raises:
        SuiteLoadError: If the file is missing, not valid YAML, or fails validation
    """
    suite_path = Path(path)
    if not suite_path.exists() and not suite_path.is_absolute():
        candidate = get_settings().config_path / "suites" / suite_path
        if candidate.exists():
            suite_path = candidate

    if not suite_path.exists():
        raise SuiteLoadError(f"Suite file not found: {suite_path}")

    try:
        with open(suite_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SuiteLoadError(f"Invalid YAML in {suite_path}: {e}") from e

    if not isinstance(raw, dict):
        raise SuiteLoadError(f"Suite file {suite_path} must contain a mapping")

    try:
        suite = ExpectationSuite.model_validate(raw)
    except ValidationError as e:
        raise SuiteLoadError(f"Validation error in {suite_path}: {e}") from e

    logger.info(
        "suite_loaded",
        suite=suite.name,
        path=str(suite_path),
        expectations=len(suite.expectations),
    )
    return suite
