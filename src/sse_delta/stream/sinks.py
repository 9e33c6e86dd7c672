"""Ready-made sink implementations."""

from __future__ import annotations


class CollectingSink:
    """Records every event it receives, in order.

    Satisfies the ``StreamSink`` protocol.  Handy for tests and for callers
    that only want the final text.
    """

    __slots__ = ("done_count", "errors", "fragments")

    def __init__(self) -> None:
        self.fragments: list[str] = []
        self.errors: list[str] = []
        self.done_count = 0

    @property
    def text(self) -> str:
        """All fragments joined together."""
        return "".join(self.fragments)

    def on_fragment(self, text: str) -> None:
        self.fragments.append(text)

    def on_done(self) -> None:
        self.done_count += 1

    def on_error(self, message: str) -> None:
        self.errors.append(message)
