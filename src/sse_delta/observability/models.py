"""Pydantic models for stream metrics."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class MetricPoint(BaseModel):
    """A single metric measurement at a point in time.

    Parameters:
        name: The metric name (e.g. ``"stream.duration_ms"``).
        value: The numeric measurement value.
        timestamp: When the measurement was taken.
        tags: Key-value labels for filtering and grouping.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    tags: dict[str, str] = Field(default_factory=dict)
