"""Shared plumbing for check functions.

A check takes an expectation and a ``CheckContext`` and returns an
``ExpectationResult``. Checks never mutate the dataset.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from datacheck.core.values import Dataset, columns, extract
from datacheck.expectations.models import Expectation
from datacheck.quality.models import ExpectationResult

DEFAULT_MAX_EXAMPLES = 5


@dataclass(frozen=True)
class CheckContext:
    """Normalized dataset plus evaluation settings, shared by all checks of one call."""

    dataset: Dataset
    max_examples: int = DEFAULT_MAX_EXAMPLES
    column_names: list[str] = field(default_factory=list)

    @classmethod
    def build(cls, dataset: Dataset, max_examples: int = DEFAULT_MAX_EXAMPLES) -> CheckContext:
        return cls(dataset=dataset, max_examples=max_examples, column_names=columns(dataset))

    @property
    def row_count(self) -> int:
        return len(self.dataset)

    def has_column(self, column: str) -> bool:
        return column in self.column_names

    def values(self, column: str) -> list[Any]:
        return extract(self.dataset, column)

    def examples(self, items: list[Any]) -> list[Any]:
        return items[: self.max_examples]


Dispatcher = Callable[[Expectation, CheckContext], ExpectationResult]


def column_not_found(expectation: Expectation, ctx: CheckContext, column: str) -> ExpectationResult:
    """Failure for a column absent from every record."""
    return ExpectationResult(
        expectation=expectation,
        success=False,
        message=f"{expectation.description}: column {column!r} not found",
        details={
            "column_found": False,
            "column": column,
            "available_columns": list(ctx.column_names),
        },
    )
