"""Observability helpers for articlesum."""

from __future__ import annotations

import logging
import time

import structlog
from prometheus_client import Counter, Histogram

_logger_configured = False


def configure_logging(level: int | str = logging.INFO) -> None:
    global _logger_configured  # noqa: PLW0603 - module-level guard
    if _logger_configured:
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    # stdout carries the summary only; logs go to stderr.
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _logger_configured = True


def bind_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_correlation_id() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str = "articlesum") -> structlog.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)


class PipelineMetrics:
    """Prometheus metrics for the fetch and generation stages."""

    fetch_latency = Histogram(
        "articlesum_fetch_duration_seconds",
        "Time spent downloading and parsing a document.",
        buckets=(0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
    )
    fetched_documents = Histogram(
        "articlesum_fetched_document_count",
        "Documents produced per fetch.",
        buckets=(0, 1, 2, 5, 10, 20, 40),
    )
    generation_latency = Histogram(
        "articlesum_generation_duration_seconds",
        "Time spent waiting for the model.",
        buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0),
    )
    generation_failures = Counter(
        "articlesum_generation_failures_total",
        "Generation calls that raised.",
        ["backend"],
    )

    @classmethod
    def observe_fetch_latency(cls, duration_seconds: float) -> None:
        cls.fetch_latency.observe(duration_seconds)

    @classmethod
    def observe_fetched_documents(cls, document_count: int) -> None:
        cls.fetched_documents.observe(document_count)

    @classmethod
    def observe_generation(cls, duration_seconds: float) -> None:
        cls.generation_latency.observe(duration_seconds)

    @classmethod
    def record_generation_failure(cls, backend: str) -> None:
        cls.generation_failures.labels(backend=backend).inc()


class TimedSection:
    """Context manager capturing elapsed time for metrics."""

    def __init__(self, callback) -> None:
        self._callback = callback
        self._start = 0.0
        self.duration = 0.0

    def __enter__(self) -> "TimedSection":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        self.duration = time.perf_counter() - self._start
        if exc_type is None:
            self._callback(self.duration)


__all__ = [
    "PipelineMetrics",
    "TimedSection",
    "bind_correlation_id",
    "clear_correlation_id",
    "configure_logging",
    "get_logger",
]
