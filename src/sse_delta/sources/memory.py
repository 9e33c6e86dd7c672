"""In-memory sources for replaying captured streams."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable

logger = logging.getLogger(__name__)


def chunk_text(text: str | bytes, size: int) -> list[str | bytes]:
    """Split *text* into consecutive increments of at most *size* items."""
    if size <= 0:
        msg = f"size must be positive, got {size}"
        raise ValueError(msg)
    return [text[i : i + size] for i in range(0, len(text), size)]


class IterableSource:
    """A ``StreamSource`` backed by a sync or async iterable of increments.

    Records how many increments were read and whether the source was
    closed, which makes it the standard fake in tests.  An optional
    *delay* yields control to the event loop before every increment so
    concurrent tasks (cancellation, consumers) get a chance to run.

    Parameters:
        chunks: The increments to replay, in order.
        status_code: Status reported before streaming.
        error_body: Body returned for a failed status.
        has_body: When ``False``, :meth:`chunks` returns ``None``.
        delay: Seconds to sleep before each increment.
    """

    __slots__ = (
        "_chunks",
        "_delay",
        "_error_body",
        "_has_body",
        "_status_code",
        "chunks_read",
        "closed",
    )

    def __init__(
        self,
        chunks: Iterable[str | bytes] | AsyncIterable[str | bytes] = (),
        *,
        status_code: int = 200,
        error_body: str | None = None,
        has_body: bool = True,
        delay: float = 0.0,
    ) -> None:
        self._chunks = chunks
        self._status_code = status_code
        self._error_body = error_body
        self._has_body = has_body
        self._delay = delay
        self.chunks_read = 0
        self.closed = False

    @property
    def status_code(self) -> int:
        return self._status_code

    async def error_body(self) -> str | None:
        return self._error_body

    def chunks(self) -> AsyncIterator[str | bytes] | None:
        if not self._has_body:
            return None
        return self._iterate()

    async def aclose(self) -> None:
        if not self.closed:
            logger.debug("Closing in-memory source after %d increments", self.chunks_read)
        self.closed = True

    async def _iterate(self) -> AsyncIterator[str | bytes]:
        if isinstance(self._chunks, AsyncIterable):
            async for chunk in self._chunks:
                if self.closed:
                    return
                await asyncio.sleep(self._delay)
                self.chunks_read += 1
                yield chunk
            return
        for chunk in self._chunks:
            if self.closed:
                return
            await asyncio.sleep(self._delay)
            self.chunks_read += 1
            yield chunk
