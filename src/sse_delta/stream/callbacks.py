"""Stream callback protocol for observability and event hooks."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sse_delta.models.frames import Frame
from sse_delta.models.streaming import StreamResult


@runtime_checkable
class StreamCallback(Protocol):
    """Protocol for stream lifecycle observers.

    Observers are notified alongside the sink but cannot affect the
    stream: an observer that raises is logged and skipped.  Missing
    methods are simply not called, so implement only the hooks you need.
    """

    def on_stream_start(self) -> None: ...
    def on_frame(self, frame: Frame) -> None: ...
    def on_fragment(self, text: str) -> None: ...
    def on_stream_end(self, result: StreamResult) -> None: ...
