#!/usr/bin/env python3
"""Replay a captured stream as tagged events, stopping early.

Shows the pull-style API: ``aiter_events`` yields ``FragmentEvent``
values followed by a ``DoneEvent`` or ``ErrorEvent``.  Breaking out of the
loop cancels the stream and closes the source.

Usage:
    python examples/replay_events.py capture.sse [max_fragments]
"""

from __future__ import annotations

import asyncio
import sys
from contextlib import aclosing
from pathlib import Path

from sse_delta import DoneEvent, ErrorEvent, FragmentEvent, IterableSource, aiter_events, chunk_text


async def replay(path: Path, max_fragments: int) -> None:
    source = IterableSource(chunk_text(path.read_bytes(), 32), delay=0.01)
    count = 0
    async with aclosing(aiter_events(source)) as events:
        async for event in events:
            match event:
                case FragmentEvent(text=text):
                    print(text, end="", flush=True)
                    count += 1
                    if count >= max_fragments:
                        print("\n[stopped early]")
                        break
                case DoneEvent():
                    print("\n[done]")
                case ErrorEvent(message=message):
                    print(f"\n[error] {message}")
    print(f"increments read: {source.chunks_read}, source closed: {source.closed}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    limit = int(sys.argv[2]) if len(sys.argv) > 2 else 1_000_000
    asyncio.run(replay(Path(sys.argv[1]), limit))
