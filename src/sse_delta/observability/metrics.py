"""Built-in metrics collectors."""

from __future__ import annotations

import json
import logging
from typing import Any

from .models import MetricPoint

logger = logging.getLogger(__name__)


class InMemoryMetricsCollector:
    """Keeps metric points in memory for tests and debugging.

    ``get_summary`` reports min, max, avg, total and count for one metric
    name, optionally restricted to points carrying a given tag.
    """

    __slots__ = ("_metrics",)

    def __init__(self) -> None:
        self._metrics: list[MetricPoint] = []

    def record(self, metric: MetricPoint) -> None:
        self._metrics.append(metric)

    def flush(self) -> None:
        """No-op; points stay available through ``get_metrics()``."""

    def get_metrics(self, name: str | None = None) -> list[MetricPoint]:
        """Return stored points, optionally filtered by *name*."""
        if name is None:
            return list(self._metrics)
        return [m for m in self._metrics if m.name == name]

    def get_summary(self, name: str, **tags: str) -> dict[str, Any]:
        """Summarise the values recorded under *name*.

        Parameters:
            name: The metric name to summarise.
            **tags: Only include points whose tags contain these pairs.

        Returns:
            A dict with ``min``, ``max``, ``avg``, ``total`` and ``count``,
            or an empty dict when nothing matches.
        """
        values = [
            m.value
            for m in self._metrics
            if m.name == name and all(m.tags.get(k) == v for k, v in tags.items())
        ]
        if not values:
            return {}
        return {
            "min": min(values),
            "max": max(values),
            "avg": sum(values) / len(values),
            "total": sum(values),
            "count": len(values),
        }

    def clear(self) -> None:
        self._metrics.clear()


class LoggingMetricsCollector:
    """Emits every metric point as a JSON log line through ``logging``."""

    __slots__ = ("_log_level",)

    def __init__(self, log_level: int = logging.INFO) -> None:
        self._log_level = log_level

    def record(self, metric: MetricPoint) -> None:
        data = {
            "name": metric.name,
            "value": metric.value,
            "timestamp": metric.timestamp.isoformat(),
            "tags": metric.tags,
        }
        logger.log(self._log_level, json.dumps(data, default=str))

    def flush(self) -> None:
        """No-op; points are logged as soon as they are recorded."""
