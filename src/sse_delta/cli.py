"""CLI interface for sse-delta.

Requires the 'cli' extra: pip install sse-delta[cli]
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

try:
    import typer
    from rich.console import Console
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install sse-delta[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from sse_delta import __version__
from sse_delta.models.config import DecoderConfig
from sse_delta.models.streaming import StreamOutcome, StreamResult
from sse_delta.sources.memory import IterableSource, chunk_text
from sse_delta.stream.controller import StreamController

app = typer.Typer(
    name="sse-delta",
    help="Incremental decoder for streamed chat completion responses.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"sse-delta {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the sse-delta installation."""
    table = Table(title="sse-delta info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "httpx", "typer", "rich"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def decode(
    path: Path = typer.Argument(..., help="Captured event-stream transcript"),  # noqa: B008
    chunk_size: int = typer.Option(
        64, "--chunk-size", "-c", min=1, help="Replay increment size in bytes",
    ),
    raw: bool = typer.Option(False, "--raw", help="Print only the decoded text"),
    strict: bool = typer.Option(
        False, "--strict", help="Fail when the stream ends mid-payload",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Replay a captured stream through the decoder and print the content."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not path.is_file():
        err_console.print(f"[red]Error: {path} does not exist[/red]")
        raise typer.Exit(code=1)

    source = IterableSource(chunk_text(path.read_bytes(), chunk_size))
    controller = StreamController(DecoderConfig(strict_trailing_payload=strict))
    errors: list[str] = []

    def _print_fragment(text: str) -> None:
        console.print(text, end="", markup=False, highlight=False, soft_wrap=True)

    result = asyncio.run(controller.run(source, on_fragment=_print_fragment, on_error=errors.append))
    console.print()

    for message in errors:
        err_console.print(f"[red]Error: {message}[/red]")
    if not raw:
        _print_summary(result, source.chunks_read)
    if result.outcome is not StreamOutcome.COMPLETED:
        raise typer.Exit(code=1)


def _print_summary(result: StreamResult, increments: int) -> None:
    table = Table(title="stream summary")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Outcome", result.outcome.value)
    table.add_row("Increments", str(increments))
    table.add_row("Fragments", str(result.fragment_count))
    if result.model:
        table.add_row("Model", result.model)
    if result.finish_reason:
        table.add_row("Finish reason", result.finish_reason)
    if result.usage is not None:
        table.add_row("Total tokens", str(result.usage.total_tokens))
    table.add_row("Duration", f"{result.duration_ms:.1f} ms")
    console.print(table)


if __name__ == "__main__":
    app()
