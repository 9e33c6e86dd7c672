"""Stream callback that turns lifecycle events into metrics."""

from __future__ import annotations

from collections import Counter

from sse_delta.models.frames import Frame, FrameKind
from sse_delta.models.streaming import StreamResult
from sse_delta.protocols.observability import MetricsCollector

from .models import MetricPoint


class MetricsCallback:
    """A ``StreamCallback`` that records per-stream metrics.

    At the end of each stream it records:

    - ``stream.fragments``: fragments delivered
    - ``stream.characters``: total fragment length
    - ``stream.frames``: lines seen, one point per ``FrameKind``
    - ``stream.duration_ms``: wall time, tagged with the outcome

    Usage::

        collector = InMemoryMetricsCollector()
        controller = StreamController(callbacks=[MetricsCallback(collector)])

    Parameters:
        collector: Destination for the recorded points.
        tags: Extra tags attached to every point (e.g. the model name).
    """

    __slots__ = ("_characters", "_collector", "_frames", "_tags")

    def __init__(self, collector: MetricsCollector, tags: dict[str, str] | None = None) -> None:
        self._collector = collector
        self._tags = dict(tags or {})
        self._frames: Counter[FrameKind] = Counter()
        self._characters = 0

    def on_stream_start(self) -> None:
        self._frames.clear()
        self._characters = 0

    def on_frame(self, frame: Frame) -> None:
        self._frames[frame.kind] += 1

    def on_fragment(self, text: str) -> None:
        self._characters += len(text)

    def on_stream_end(self, result: StreamResult) -> None:
        outcome = {"outcome": result.outcome.value}
        self._record("stream.fragments", result.fragment_count, outcome)
        self._record("stream.characters", self._characters, outcome)
        for kind in FrameKind:
            self._record("stream.frames", self._frames[kind], {"kind": kind.value})
        self._record("stream.duration_ms", result.duration_ms, outcome)
        self._collector.flush()

    def _record(self, name: str, value: float, tags: dict[str, str]) -> None:
        self._collector.record(
            MetricPoint(name=name, value=float(value), tags={**self._tags, **tags}),
        )
