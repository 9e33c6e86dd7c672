"""Sink protocol: the consumer of decoded stream events."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StreamSink(Protocol):
    """Receives fragments in arrival order, then exactly one of
    ``on_done`` or ``on_error`` -- or neither, if the stream is cancelled.
    """

    def on_fragment(self, text: str) -> None: ...
    def on_done(self) -> None: ...
    def on_error(self, message: str) -> None: ...
