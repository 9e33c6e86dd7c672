"""Observability: stream metrics and collectors."""

from .callback import MetricsCallback
from .metrics import InMemoryMetricsCollector, LoggingMetricsCollector
from .models import MetricPoint

__all__ = [
    "InMemoryMetricsCollector",
    "LoggingMetricsCollector",
    "MetricPoint",
    "MetricsCallback",
]
