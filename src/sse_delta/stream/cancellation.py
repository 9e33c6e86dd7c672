"""Cooperative cancellation for a running stream."""

from __future__ import annotations

import asyncio


class CancellationToken:
    """A one-shot cancellation flag that can also be awaited.

    The controller races every read against :meth:`wait`, so cancelling
    takes effect at the next suspension point even while a read is
    blocked.  Cancelling twice is harmless.

    Usage::

        token = CancellationToken()
        task = asyncio.create_task(controller.run(source, ..., cancel_token=token))
        ...
        token.cancel()
    """

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        """Block until :meth:`cancel` is called."""
        await self._event.wait()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"
