"""Shared fixtures for sse-delta tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any

import pytest


def chunk_payload(content: str | None = None, **extra: Any) -> str:
    """Build a chat completion chunk payload carrying *content*."""
    delta: dict[str, Any] = {} if content is None else {"content": content}
    record: dict[str, Any] = {"choices": [{"index": 0, "delta": delta}], **extra}
    return json.dumps(record)


def data_line(content: str | None = None, **extra: Any) -> str:
    """Build one newline-terminated data frame followed by a blank line."""
    return f"data: {chunk_payload(content, **extra)}\n\n"


def build_transcript(fragments: list[str], *, done: bool = True) -> str:
    """Build a full event-stream transcript for *fragments*."""
    text = "".join(data_line(f) for f in fragments)
    if done:
        text += "data: [DONE]\n\n"
    return text


class Recorder:
    """Records every callback invocation, in order, as ``(name, arg)`` tuples."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def on_fragment(self, text: str) -> None:
        self.calls.append(("fragment", text))

    def on_error(self, message: str) -> None:
        self.calls.append(("error", message))

    def on_done(self) -> None:
        self.calls.append(("done", None))

    @property
    def fragments(self) -> list[str]:
        return [arg for name, arg in self.calls if name == "fragment" and arg is not None]

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def kwargs(self) -> dict[str, Any]:
        return {
            "on_fragment": self.on_fragment,
            "on_error": self.on_error,
            "on_done": self.on_done,
        }


async def failing_after(chunks: list[str], error: Exception) -> AsyncIterator[str]:
    """Async iterable that yields *chunks* and then raises *error*."""
    for chunk in chunks:
        yield chunk
    raise error


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def hello_transcript() -> str:
    return build_transcript(["Hel", "lo", " world"])
