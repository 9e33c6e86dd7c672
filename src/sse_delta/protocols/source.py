"""Source protocol: where raw stream increments come from.

Any object with these members can feed the controller -- no inheritance
required.  Opening and authenticating the connection is the caller's job;
a source represents a response that already exists.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class StreamSource(Protocol):
    """Protocol for a streamed response body."""

    @property
    def status_code(self) -> int:
        """Status reported before streaming began (2xx means success)."""
        ...

    async def error_body(self) -> str | None:
        """Read the full body of a failed response.

        Returns:
            The body text, or ``None`` when the response has no body.
        """
        ...

    def chunks(self) -> AsyncIterator[str | bytes] | None:
        """Return an iterator over raw increments.

        Returns:
            An async iterator yielding increments until the body is
            exhausted, or ``None`` when the response has no readable body.
        """
        ...

    async def aclose(self) -> None:
        """Abort the underlying transport.  Must be safe to call twice."""
        ...
