"""Structured logging infrastructure.

Works for both local development (console output) and deployments that
ship JSON logs to an aggregator.

Usage:
    from datacheck.core.logging import get_logger, configure_logging

    # Configured from settings at import; override explicitly if needed
    configure_logging(log_level="INFO", log_format="console")

    # Get logger in any module
    logger = get_logger(__name__)

    # Log with structured context
    logger.info("evaluation_started", expectations=12, rows=1000)

    # Scope context to a block
    with log_context(evaluation_id="abc123"):
        logger.info("expectation_evaluated", kind="values_between")
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from threading import Lock
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger

from datacheck.core.config import Settings, get_settings

# Context variables for correlation
_run_context: ContextVar[dict[str, Any] | None] = ContextVar("run_context", default=None)


@dataclass
class EvaluationMetrics:
    """Metrics collected during a single evaluation call."""

    evaluation_id: str
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None

    # Counters
    expectations_evaluated: int = 0
    rows_processed: int = 0

    # Per-kind timings (seconds)
    timings: dict[str, float] = field(default_factory=dict)

    errors: list[str] = field(default_factory=list)

    # Worker threads record into the same instance
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    @property
    def duration_seconds(self) -> float:
        """Get duration in seconds."""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return (datetime.now(UTC) - self.start_time).total_seconds()

    def record_timing(self, operation: str, seconds: float) -> None:
        """Record timing for one expectation kind."""
        with self._lock:
            self.timings[operation] = self.timings.get(operation, 0.0) + seconds
            self.expectations_evaluated += 1

    def record_error(self, message: str) -> None:
        with self._lock:
            self.errors.append(message)

    def get_slowest_operations(self, n: int = 5) -> list[tuple[str, float]]:
        """Get the N slowest expectation kinds."""
        return sorted(self.timings.items(), key=lambda x: x[1], reverse=True)[:n]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "evaluation_id": self.evaluation_id,
            "duration_seconds": self.duration_seconds,
            "expectations_evaluated": self.expectations_evaluated,
            "rows_processed": self.rows_processed,
            "timings": dict(self.timings),
            "error_count": len(self.errors),
        }


# Metrics storage (per evaluation call)
_current_metrics: ContextVar[EvaluationMetrics | None] = ContextVar(
    "current_metrics", default=None
)


def start_evaluation_metrics(evaluation_id: str, rows: int = 0) -> EvaluationMetrics:
    """Start collecting metrics for an evaluation call."""
    metrics = EvaluationMetrics(evaluation_id=evaluation_id, rows_processed=rows)
    _current_metrics.set(metrics)
    return metrics


def get_evaluation_metrics() -> EvaluationMetrics | None:
    """Get current evaluation metrics."""
    return _current_metrics.get()


def end_evaluation_metrics() -> EvaluationMetrics | None:
    """End metrics collection for the current evaluation call."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.end_time = datetime.now(UTC)
        _current_metrics.set(None)
    return metrics


def _add_run_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add scoped context to log events."""
    context = _run_context.get()
    if context:
        event_dict.update(context)
    return event_dict


def _add_metrics_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add current metrics context."""
    metrics = _current_metrics.get()
    if metrics:
        event_dict["_evaluation_id"] = metrics.evaluation_id
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format ("console" for development, "json" for production)
        show_timestamps: Whether to show timestamps
        color: Whether to use colors in console mode
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_run_context,
        _add_metrics_context,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=color,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Also configure stdlib logging for libraries
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))


class LogContext:
    """Context manager for adding context to logs within a scope."""

    def __init__(self, **context: Any):
        self.context = context
        self.token: Any = None

    def __enter__(self) -> LogContext:
        current = _run_context.get() or {}
        self.token = _run_context.set({**current, **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self.token:
            _run_context.reset(self.token)


def log_context(**context: Any) -> LogContext:
    """Create a context manager for scoped logging context.

    Usage:
        with log_context(evaluation_id="abc"):
            logger.info("processing")  # Will include evaluation_id
    """
    return LogContext(**context)


def record_operation_timing(operation: str, seconds: float) -> None:
    """Record timing for an expectation kind in current evaluation metrics."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.record_timing(operation, seconds)


def record_evaluation_error(message: str) -> None:
    """Record a check error in current evaluation metrics."""
    metrics = _current_metrics.get()
    if metrics:
        metrics.record_error(message)


def configure_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from ``DATACHECK_LOG_LEVEL`` and ``DATACHECK_LOG_FORMAT``.

    Runs once at import. Call again after changing the environment; loggers
    already used keep the configuration they were first used with.
    """
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        color=settings.log_format == "console",
    )


# Initialize from settings
configure_from_settings()
