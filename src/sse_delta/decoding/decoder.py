"""Single-stream decoder composing framing, classification and parsing."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from sse_delta.framing.classifier import EventClassifier
from sse_delta.framing.splitter import FrameSplitter
from sse_delta.models.config import DecoderConfig
from sse_delta.models.decoding import DecodeKind, DecodeResult
from sse_delta.models.frames import Frame

from .payload import PayloadDecoder

logger = logging.getLogger(__name__)


class StreamDecoder:
    """Pure, I/O-free decoder for one event stream.

    Feed it raw increments in arrival order; it yields one
    :class:`DecodeResult` per data frame.  Non-data lines are classified
    and dropped, but can be observed through *on_frame*.

    Usage::

        decoder = StreamDecoder()
        for chunk in chunks:
            for result in decoder.feed(chunk):
                if result.kind is DecodeKind.SENTINEL:
                    break
                if result.kind is DecodeKind.FRAGMENT:
                    print(result.text, end="")
        for result in decoder.flush():
            ...
        decoder.close()
    """

    __slots__ = ("_classifier", "_config", "_on_frame", "_payloads", "_splitter")

    def __init__(
        self,
        config: DecoderConfig | None = None,
        on_frame: Callable[[Frame], None] | None = None,
    ) -> None:
        self._config = config or DecoderConfig()
        self._splitter = FrameSplitter(self._config.encoding)
        self._classifier = EventClassifier(self._config)
        self._payloads = PayloadDecoder(self._config)
        self._on_frame = on_frame

    @property
    def config(self) -> DecoderConfig:
        return self._config

    @property
    def has_pending(self) -> bool:
        """Whether any partial line or incomplete payload is buffered."""
        return bool(self._splitter.pending) or self._payloads.has_carry

    def feed(self, increment: str | bytes) -> Iterator[DecodeResult]:
        """Yield decode results for every line completed by *increment*.

        Iteration stops right after a ``SENTINEL`` result; any text after
        it stays buffered and is only seen by :meth:`flush`.
        """
        for line in self._splitter.push(increment):
            result = self._decode_line(line)
            if result is None:
                continue
            yield result
            if result.kind is DecodeKind.SENTINEL:
                return

    def flush(self) -> list[DecodeResult]:
        """Decode whatever is left in the line buffer.

        A missing trailing newline is treated as a complete line.  Sentinels
        found here carry no meaning since the stream is already ending.
        """
        results: list[DecodeResult] = []
        for line in self._splitter.flush():
            result = self._decode_line(line)
            if result is None or result.kind is DecodeKind.SENTINEL:
                continue
            results.append(result)
        return results

    def close(self) -> str | None:
        """Finish the stream and return any payload that never completed."""
        dropped = self._payloads.finish()
        if dropped is not None:
            logger.debug("Stream closed with %d chars of incomplete payload", len(dropped))
        return dropped

    def _decode_line(self, line: str) -> DecodeResult | None:
        frame = self._classifier.classify(line)
        if self._on_frame is not None:
            self._on_frame(frame)
        if not frame.is_data or frame.payload is None:
            return None
        return self._payloads.decode(frame.payload)


def decode_text(text: str | bytes, config: DecoderConfig | None = None) -> list[str]:
    """Decode a complete event-stream transcript into its content fragments.

    Decoding stops at the sentinel; content after a missing final newline
    is still recovered.
    """
    decoder = StreamDecoder(config)
    fragments: list[str] = []
    for result in decoder.feed(text):
        if result.kind is DecodeKind.FRAGMENT and result.text:
            fragments.append(result.text)
    fragments.extend(r.text for r in decoder.flush() if r.kind is DecodeKind.FRAGMENT and r.text)
    decoder.close()
    return fragments
