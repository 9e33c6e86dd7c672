"""Tests for sse_delta.sources.memory -- IterableSource and chunk_text."""

from __future__ import annotations

import pytest

from sse_delta.protocols.source import StreamSource
from sse_delta.sources.memory import IterableSource, chunk_text


class TestChunkText:
    """Fixed-size replay increments."""

    def test_even_split(self) -> None:
        assert chunk_text("abcdef", 2) == ["ab", "cd", "ef"]

    def test_remainder(self) -> None:
        assert chunk_text("abcde", 2) == ["ab", "cd", "e"]

    def test_bytes(self) -> None:
        assert chunk_text(b"abc", 2) == [b"ab", b"c"]

    def test_empty(self) -> None:
        assert chunk_text("", 4) == []

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size: int) -> None:
        with pytest.raises(ValueError, match="size must be positive"):
            chunk_text("abc", size)


class TestIterableSource:
    """The in-memory stream source."""

    def test_protocol_compliance(self) -> None:
        assert isinstance(IterableSource(), StreamSource)

    @pytest.mark.asyncio
    async def test_replays_chunks_in_order(self) -> None:
        source = IterableSource(["a", "b", "c"])
        chunks = source.chunks()
        assert chunks is not None
        assert [c async for c in chunks] == ["a", "b", "c"]
        assert source.chunks_read == 3

    @pytest.mark.asyncio
    async def test_async_iterable(self) -> None:
        async def _gen():
            yield b"x"
            yield b"y"

        chunks = IterableSource(_gen()).chunks()
        assert chunks is not None
        assert [c async for c in chunks] == [b"x", b"y"]

    @pytest.mark.asyncio
    async def test_stops_after_close(self) -> None:
        source = IterableSource(["a", "b", "c"])
        chunks = source.chunks()
        assert chunks is not None
        assert await anext(chunks) == "a"
        await source.aclose()
        assert [c async for c in chunks] == []
        assert source.closed

    @pytest.mark.asyncio
    async def test_error_body_and_status(self) -> None:
        source = IterableSource(status_code=503, error_body="overloaded")
        assert source.status_code == 503
        assert await source.error_body() == "overloaded"

    def test_no_body(self) -> None:
        assert IterableSource(has_body=False).chunks() is None

    @pytest.mark.asyncio
    async def test_close_twice(self) -> None:
        source = IterableSource()
        await source.aclose()
        await source.aclose()
        assert source.closed
