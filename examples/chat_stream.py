#!/usr/bin/env python3
"""Stream a chat completion from an OpenAI-compatible endpoint.

Prints content as it arrives and a short summary at the end.  Press
Ctrl+C to cancel mid-stream.

Requirements:
    pip install sse-delta[http,cli]
    export OPENAI_API_KEY=sk-...
    export OPENAI_BASE_URL=https://api.openai.com/v1   # optional
"""

from __future__ import annotations

import asyncio
import os
import signal
import sys

import httpx
from rich.console import Console

from sse_delta import CancellationToken, HttpxSource, StreamController, StreamOutcome

MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
BASE_URL = os.environ.get("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/")

console = Console()


async def main(prompt: str) -> int:
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        console.print("[red]OPENAI_API_KEY is not set[/red]")
        return 1

    token = CancellationToken()
    body = {
        "model": MODEL,
        "messages": [{"role": "user", "content": prompt}],
        "stream": True,
        "stream_options": {"include_usage": True},
    }
    headers = {"Authorization": f"Bearer {api_key}"}

    async with httpx.AsyncClient(timeout=httpx.Timeout(60.0, read=None)) as client:
        async with client.stream(
            "POST", f"{BASE_URL}/chat/completions", json=body, headers=headers,
        ) as response:
            loop = asyncio.get_running_loop()
            try:
                loop.add_signal_handler(signal.SIGINT, token.cancel)
            except NotImplementedError:
                pass  # Windows event loops

            result = await StreamController().run(
                HttpxSource(response),
                on_fragment=lambda text: console.print(text, end="", markup=False, soft_wrap=True),
                on_error=lambda message: console.print(f"\n[red]error:[/red] {message}"),
                on_done=console.print,
                cancel_token=token,
            )

    if result.outcome is StreamOutcome.CANCELLED:
        console.print("\n[yellow]cancelled[/yellow]")
    usage = result.usage.total_tokens if result.usage else "?"
    console.print(
        f"[dim]{result.fragment_count} fragments, finish={result.finish_reason or '-'}, "
        f"tokens={usage}, {result.duration_ms:.0f} ms[/dim]",
    )
    return 0 if result.outcome is StreamOutcome.COMPLETED else 1


if __name__ == "__main__":
    question = " ".join(sys.argv[1:]) or "Explain server-sent events in two sentences."
    sys.exit(asyncio.run(main(question)))
