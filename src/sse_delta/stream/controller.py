"""Stream controller: drives the read loop and delivers decoded fragments."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import AsyncIterator, Callable
from typing import Any

from sse_delta.decoding.decoder import StreamDecoder
from sse_delta.decoding.payload import extract_path
from sse_delta.exceptions import (
    IncompletePayloadError,
    NoStreamError,
    PreStreamError,
    SseDeltaError,
    StreamStateError,
    StreamTransportError,
)
from sse_delta.models.config import DecoderConfig
from sse_delta.models.decoding import DecodeKind, DecodeResult
from sse_delta.models.frames import Frame
from sse_delta.models.streaming import StreamOutcome, StreamResult, StreamState, StreamUsage
from sse_delta.protocols.sink import StreamSink
from sse_delta.protocols.source import StreamSource

from .callbacks import StreamCallback
from .cancellation import CancellationToken

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Request failed with status {status}"
NO_STREAM_MESSAGE = "No response stream available"
CONNECTIVITY_MESSAGE = "Connection to the stream failed"
INCOMPLETE_PAYLOAD_MESSAGE = "Stream ended with an incomplete payload"

# Keys searched, in order, for a human-readable message in an error body.
_ERROR_KEYS = ("error", "message", "detail")

_OBSERVER_HOOKS = frozenset({"on_stream_start", "on_frame", "on_fragment", "on_stream_end"})

_EOF = object()
_CANCELLED = object()


def error_message_from_body(body: str | None, status_code: int) -> str:
    """Pick the best message out of a failed response body.

    Understands ``{"error": "..."}``, ``{"error": {"message": "..."}}``,
    ``{"message": "..."}`` and ``{"detail": "..."}``.  Falls back to a
    generic message naming the status when the body is missing or has no
    usable message.
    """
    if body:
        try:
            data = json.loads(body)
        except ValueError:
            data = None
        message = _find_message(data)
        if message:
            return message
    return GENERIC_FAILURE_MESSAGE.format(status=status_code)


def _find_message(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    for key in _ERROR_KEYS:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
        nested = _find_message(value)
        if nested:
            return nested
    return None


async def _abort(source: StreamSource) -> None:
    try:
        await source.aclose()
    except Exception:
        logger.warning("Closing stream source %r failed", source, exc_info=True)


async def _next_increment(
    chunks: AsyncIterator[str | bytes], token: CancellationToken,
) -> Any:
    """Await the next increment, or cancellation, whichever comes first."""
    if token.cancelled:
        return _CANCELLED

    async def _read() -> Any:
        try:
            return await anext(chunks)
        except StopAsyncIteration:
            return _EOF

    read = asyncio.ensure_future(_read())
    waiter = asyncio.ensure_future(token.wait())
    try:
        done, _ = await asyncio.wait({read, waiter}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        pending = [f for f in (read, waiter) if not f.done()]
        for fut in pending:
            fut.cancel()
        if pending:
            await asyncio.wait(pending)
    if read in done:
        return read.result()
    return _CANCELLED


class StreamController:
    """Runs one event stream from a source to a set of callbacks.

    The controller reads increments from the source, decodes them through a
    :class:`StreamDecoder` and invokes ``on_fragment`` synchronously for each
    fragment in arrival order.  It then calls exactly one of ``on_done`` or
    ``on_error``, or neither when the stream is cancelled.  Stream failures
    are never raised out of :meth:`run`; they are reported through
    ``on_error`` and on the returned :class:`StreamResult`.

    Lifecycle: ``IDLE -> STREAMING -> COMPLETED | FAILED | CANCELLED``.  An
    instance handles exactly one stream.

    Usage::

        controller = StreamController()
        result = await controller.run(
            source,
            on_fragment=lambda text: print(text, end="", flush=True),
            on_error=lambda message: print(f"\\nerror: {message}"),
            on_done=lambda: print(),
        )

    Parameters:
        config: Wire-format settings shared by the decoder.
        callbacks: Observers notified of lifecycle events.
    """

    __slots__ = (
        "_callbacks",
        "_config",
        "_finish_reason",
        "_fragment_count",
        "_model",
        "_state",
        "_usage",
    )

    def __init__(
        self,
        config: DecoderConfig | None = None,
        callbacks: list[StreamCallback] | None = None,
    ) -> None:
        self._config = config or DecoderConfig()
        self._callbacks: list[StreamCallback] = list(callbacks or [])
        self._state = StreamState.IDLE
        self._fragment_count = 0
        self._model = ""
        self._finish_reason = ""
        self._usage: StreamUsage | None = None

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def add_callback(self, callback: StreamCallback) -> StreamController:
        """Register an observer. Returns self for chaining."""
        self._callbacks.append(callback)
        return self

    async def run(
        self,
        source: StreamSource,
        on_fragment: Callable[[str], None],
        on_error: Callable[[str], None] | None = None,
        on_done: Callable[[], None] | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> StreamResult:
        """Stream *source* to the given callbacks.

        Parameters:
            source: The response to read from.
            on_fragment: Called with each content fragment, in order.
            on_error: Called once with a message if the stream fails.
            on_done: Called once when the stream completes.
            cancel_token: Token that stops the stream when cancelled.

        Returns:
            A :class:`StreamResult` describing the terminal outcome.

        Raises:
            StreamStateError: If this controller already ran a stream.
        """
        if self._state is not StreamState.IDLE:
            msg = f"controller already used (state={self._state})"
            raise StreamStateError(msg)
        self._state = StreamState.STREAMING
        token = cancel_token or CancellationToken()
        start = time.perf_counter()
        self._notify("on_stream_start")
        logger.debug("Stream started (status=%s)", source.status_code)

        try:
            outcome = await self._stream(source, on_fragment, token)
        except asyncio.CancelledError:
            await _abort(source)
            self._finish(StreamOutcome.CANCELLED, start)
            raise
        except SseDeltaError as exc:
            await _abort(source)
            return self._fail(exc, on_error, start)
        except Exception as exc:
            logger.exception("Stream failed unexpectedly")
            await _abort(source)
            error = StreamTransportError(CONNECTIVITY_MESSAGE)
            error.__cause__ = exc
            return self._fail(error, on_error, start)

        await _abort(source)
        if outcome is StreamOutcome.CANCELLED or token.cancelled:
            logger.debug("Stream cancelled after %d fragments", self._fragment_count)
            return self._finish(StreamOutcome.CANCELLED, start)

        result = self._finish(StreamOutcome.COMPLETED, start)
        if on_done is not None:
            try:
                on_done()
            except Exception:
                logger.exception("on_done callback failed")
        return result

    async def run_with_sink(
        self,
        source: StreamSource,
        sink: StreamSink,
        cancel_token: CancellationToken | None = None,
    ) -> StreamResult:
        """Like :meth:`run`, delivering to a :class:`StreamSink`."""
        return await self.run(
            source,
            on_fragment=sink.on_fragment,
            on_error=sink.on_error,
            on_done=sink.on_done,
            cancel_token=cancel_token,
        )

    # -- Internal helpers --

    async def _stream(
        self,
        source: StreamSource,
        on_fragment: Callable[[str], None],
        token: CancellationToken,
    ) -> StreamOutcome:
        status = source.status_code
        if not 200 <= status < 300:
            try:
                body = await source.error_body()
            except Exception:
                logger.warning("Reading error body failed (status=%s)", status, exc_info=True)
                body = None
            raise PreStreamError(error_message_from_body(body, status), status)

        chunks = source.chunks()
        if chunks is None:
            raise NoStreamError(NO_STREAM_MESSAGE)

        decoder = StreamDecoder(self._config, on_frame=self._observe_frame)
        while True:
            increment = await _next_increment(chunks, token)
            if increment is _CANCELLED:
                return StreamOutcome.CANCELLED
            if increment is _EOF:
                break
            sentinel_seen = False
            for result in decoder.feed(increment):
                if result.kind is DecodeKind.SENTINEL:
                    sentinel_seen = True
                    break
                if not self._deliver(result, on_fragment, token):
                    return StreamOutcome.CANCELLED
            if sentinel_seen:
                logger.debug("Sentinel received; stopping reads")
                break

        if token.cancelled:
            return StreamOutcome.CANCELLED
        for result in decoder.flush():
            if not self._deliver(result, on_fragment, token):
                return StreamOutcome.CANCELLED

        if token.cancelled:
            return StreamOutcome.CANCELLED
        dropped = decoder.close()
        if dropped is not None:
            if self._config.strict_trailing_payload:
                raise IncompletePayloadError(INCOMPLETE_PAYLOAD_MESSAGE, dropped)
            logger.warning(
                "Dropping %d chars of incomplete payload at end of stream", len(dropped),
            )
        return StreamOutcome.COMPLETED

    def _deliver(
        self,
        result: DecodeResult,
        on_fragment: Callable[[str], None],
        token: CancellationToken,
    ) -> bool:
        """Forward one decode result. Returns ``False`` once cancelled."""
        if result.record is not None:
            self._absorb_metadata(result.record)
        if result.kind is not DecodeKind.FRAGMENT or not result.text:
            return True
        if token.cancelled:
            return False
        self._fragment_count += 1
        on_fragment(result.text)
        self._notify("on_fragment", result.text)
        return True

    def _absorb_metadata(self, record: dict[str, Any]) -> None:
        model = record.get("model")
        if isinstance(model, str) and model:
            self._model = model
        finish_reason = extract_path(record, ("choices", 0, "finish_reason"))
        if isinstance(finish_reason, str) and finish_reason:
            self._finish_reason = finish_reason
        usage = record.get("usage")
        if isinstance(usage, dict):
            counts = {
                key: value
                for key, value in usage.items()
                if key in StreamUsage.model_fields and isinstance(value, int)
            }
            self._usage = StreamUsage.model_validate(counts)

    def _observe_frame(self, frame: Frame) -> None:
        self._notify("on_frame", frame)

    def _notify(self, hook: str, *args: Any) -> None:
        """Call *hook* on every observer. Observer failures are logged and skipped."""
        if hook not in _OBSERVER_HOOKS:
            msg = f"unknown observer hook: {hook}"
            raise ValueError(msg)
        for callback in self._callbacks:
            handler = getattr(callback, hook, None)
            if handler is None:
                continue
            try:
                handler(*args)
            except Exception:
                logger.warning(
                    "Observer %r failed in %s (state=%s)", callback, hook, self._state,
                    exc_info=True,
                )

    def _fail(
        self,
        error: SseDeltaError,
        on_error: Callable[[str], None] | None,
        start: float,
    ) -> StreamResult:
        message = str(error)
        logger.debug("Stream failed: %s", message)
        result = self._finish(StreamOutcome.FAILED, start, error=error)
        if on_error is not None:
            try:
                on_error(message)
            except Exception:
                logger.exception("on_error callback failed")
        return result

    def _finish(
        self,
        outcome: StreamOutcome,
        start: float,
        error: SseDeltaError | None = None,
    ) -> StreamResult:
        self._state = StreamState(outcome.value)
        result = StreamResult(
            outcome=outcome,
            fragment_count=self._fragment_count,
            error_message=str(error) if error is not None else None,
            error=error,
            model=self._model,
            finish_reason=self._finish_reason,
            usage=self._usage,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        self._notify("on_stream_end", result)
        return result
