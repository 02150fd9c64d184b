"""Shared pytest fixtures for all tests."""

from datetime import UTC, datetime, timedelta

import pytest

from datacheck.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate settings from the developer's environment and reset the cache."""
    for key in (
        "DATACHECK_MAX_WORKERS",
        "DATACHECK_MAX_EXAMPLES",
        "DATACHECK_TYPE_SAMPLE_SIZE",
        "DATACHECK_LOG_LEVEL",
        "DATACHECK_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def people() -> list[dict]:
    """Small clean dataset."""
    return [
        {"age": 25, "name": "Alice"},
        {"age": 30, "name": "Bob"},
        {"age": 35, "name": "Charlie"},
    ]


@pytest.fixture
def customers() -> list[dict]:
    """Dataset with nulls, missing keys and mixed quality values."""
    return [
        {"id": 1, "email": "alice@example.com", "age": 34, "score": 0.91, "label": "a"},
        {"id": 2, "email": "bob@example.org", "age": None, "score": 0.42, "label": "b"},
        {"id": 3, "email": "not-an-email", "age": 51, "score": None, "label": "a"},
        {"id": 4, "email": None, "age": 28, "score": 0.77, "label": "b"},
        {"id": 5, "age": 45, "score": 0.13, "label": "a"},
    ]


@pytest.fixture
def events() -> list[dict]:
    """Hourly time series with mixed timestamp representations."""
    start = datetime(2025, 1, 1, tzinfo=UTC)
    return [
        {"ts": start, "value": 1.0},
        {"ts": (start + timedelta(hours=1)).isoformat(), "value": 2.0},
        {"ts": "2025-01-01 02:00:00", "value": 3.0},
        {"ts": "1/1/2025 03:00:00", "value": 4.0},
        {"ts": int((start + timedelta(hours=4)).timestamp()), "value": 5.0},
    ]


@pytest.fixture
def run_check():
    """Evaluate one expectation against records through the dispatcher."""
    from datacheck.core.values import normalize_dataset
    from datacheck.quality.checks.base import CheckContext
    from datacheck.quality.evaluator import dispatch

    def run(expectation, records, max_examples=5):
        ctx = CheckContext.build(normalize_dataset(records), max_examples=max_examples)
        return dispatch(expectation, ctx)

    return run
