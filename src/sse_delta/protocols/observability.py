"""Observability protocols for metrics collection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sse_delta.observability.models import MetricPoint


@runtime_checkable
class MetricsCollector(Protocol):
    """Collects and exports metrics.

    Implementations buffer ``MetricPoint`` values and flush them to a
    backend on demand or at regular intervals.
    """

    def record(self, metric: MetricPoint) -> None:
        """Record a single metric measurement.

        Parameters:
            metric: The metric point to record.
        """
        ...

    def flush(self) -> None:
        """Flush buffered metrics to the backend."""
        ...
