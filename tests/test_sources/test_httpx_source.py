"""Tests for sse_delta.sources.httpx_source -- HttpxSource over httpx.MockTransport."""

from __future__ import annotations

import pytest

httpx = pytest.importorskip("httpx")

from sse_delta.models.streaming import StreamOutcome  # noqa: E402
from sse_delta.protocols.source import StreamSource  # noqa: E402
from sse_delta.sources.httpx_source import HttpxSource  # noqa: E402
from sse_delta.stream.controller import StreamController  # noqa: E402
from sse_delta.stream.events import collect  # noqa: E402
from tests.conftest import Recorder, build_transcript  # noqa: E402

URL = "https://api.example.com/v1/chat/completions"


def _client(response: httpx.Response) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(lambda _request: response))


class TestHttpxSource:
    """Adapting streamed httpx responses."""

    @pytest.mark.asyncio
    async def test_protocol_compliance(self) -> None:
        async with _client(httpx.Response(200, content=b"")) as client:
            async with client.stream("POST", URL, json={}) as response:
                assert isinstance(HttpxSource(response), StreamSource)

    @pytest.mark.asyncio
    async def test_collect_stream(self) -> None:
        body = build_transcript(["Hel", "lo"]).encode()
        upstream = httpx.Response(200, content=body, headers={"content-type": "text/event-stream"})
        async with _client(upstream) as client:
            async with client.stream("POST", URL, json={"stream": True}) as response:
                result = await collect(HttpxSource(response))
                assert response.is_closed

        assert result.outcome is StreamOutcome.COMPLETED
        assert result.text == "Hello"

    @pytest.mark.asyncio
    async def test_async_streamed_body(self) -> None:
        async def _body():
            yield b'data: {"choices":[{"delta":{"content":"chu'
            yield b'nked"}}]}\n\ndata: [DONE]\n\n'

        async with _client(httpx.Response(200, content=_body())) as client:
            async with client.stream("POST", URL) as response:
                result = await collect(HttpxSource(response))
        assert result.text == "chunked"

    @pytest.mark.asyncio
    async def test_rate_limited_response(self, recorder: Recorder) -> None:
        upstream = httpx.Response(429, json={"error": "rate limited"})
        async with _client(upstream) as client:
            async with client.stream("POST", URL) as response:
                result = await StreamController().run(HttpxSource(response), **recorder.kwargs())

        assert recorder.calls == [("error", "rate limited")]
        assert result.outcome is StreamOutcome.FAILED

    @pytest.mark.asyncio
    async def test_empty_error_body(self) -> None:
        async with _client(httpx.Response(500)) as client:
            async with client.stream("GET", URL) as response:
                source = HttpxSource(response)
                assert source.status_code == 500
                assert await source.error_body() is None

    @pytest.mark.asyncio
    async def test_consumed_response_has_no_chunks(self) -> None:
        async with _client(httpx.Response(200, content=b"data: x\n")) as client:
            async with client.stream("GET", URL) as response:
                await response.aread()
                assert HttpxSource(response).chunks() is None
