"""Pull-style consumption: streams as async iterators of tagged events."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from sse_delta.models.config import DecoderConfig
from sse_delta.models.streaming import (
    DoneEvent,
    ErrorEvent,
    FragmentEvent,
    StreamEvent,
    StreamResult,
)
from sse_delta.protocols.source import StreamSource

from .callbacks import StreamCallback
from .cancellation import CancellationToken
from .controller import StreamController


async def aiter_events(
    source: StreamSource,
    config: DecoderConfig | None = None,
    cancel_token: CancellationToken | None = None,
    callbacks: list[StreamCallback] | None = None,
) -> AsyncIterator[StreamEvent]:
    """Yield ``FragmentEvent`` values, then one ``DoneEvent`` or ``ErrorEvent``.

    The stream runs in a background task.  When cancelled, iteration simply
    ends without a terminal event.  Closing the generator early cancels the
    stream and aborts the source.  A bare ``break`` only closes it when the
    generator is garbage collected, so wrap it in ``contextlib.aclosing``
    when leaving the loop early.

    Usage::

        async with aclosing(aiter_events(source)) as events:
            async for event in events:
                match event:
                    case FragmentEvent(text=text):
                        print(text, end="")
                    case ErrorEvent(message=message):
                        print(f"error: {message}")
                        break
    """
    token = cancel_token or CancellationToken()
    queue: asyncio.Queue[StreamEvent | None] = asyncio.Queue()
    controller = StreamController(config, callbacks)

    async def _drive() -> None:
        try:
            await controller.run(
                source,
                on_fragment=lambda text: queue.put_nowait(FragmentEvent(text=text)),
                on_error=lambda message: queue.put_nowait(ErrorEvent(message=message)),
                on_done=lambda: queue.put_nowait(DoneEvent()),
                cancel_token=token,
            )
        finally:
            queue.put_nowait(None)

    task = asyncio.create_task(_drive())
    try:
        while True:
            event = await queue.get()
            if event is None:
                break
            yield event
    finally:
        if not task.done():
            token.cancel()
        await task


async def collect(
    source: StreamSource,
    config: DecoderConfig | None = None,
    cancel_token: CancellationToken | None = None,
    callbacks: list[StreamCallback] | None = None,
) -> StreamResult:
    """Run a stream to completion and return its result with the full text.

    Failures are reported on the result (``outcome``, ``error_message``)
    rather than raised.
    """
    parts: list[str] = []
    controller = StreamController(config, callbacks)
    result = await controller.run(source, on_fragment=parts.append, cancel_token=cancel_token)
    return result.model_copy(update={"text": "".join(parts)})
