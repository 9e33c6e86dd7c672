"""Adapter exposing an ``httpx`` streaming response as a stream source.

Requires the ``http`` extra: ``pip install sse-delta[http]``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class HttpxSource:
    """Wraps a response opened with ``AsyncClient.stream(...)``.

    The caller establishes the request; this class only reads it.  Closing
    the source closes the response, which aborts the underlying connection
    if the body has not been fully read.

    Usage::

        async with httpx.AsyncClient() as client:
            async with client.stream("POST", url, json=body) as response:
                result = await collect(HttpxSource(response))
    """

    __slots__ = ("_response",)

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    async def error_body(self) -> str | None:
        content = await self._response.aread()
        if not content:
            return None
        return self._response.text

    def chunks(self) -> AsyncIterator[bytes] | None:
        if self._response.is_stream_consumed:
            logger.warning("Response body was already consumed")
            return None
        return self._response.aiter_bytes()

    async def aclose(self) -> None:
        await self._response.aclose()
