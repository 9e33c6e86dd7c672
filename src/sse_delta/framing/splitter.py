"""Newline framing over arbitrarily chunked input."""

from __future__ import annotations

import codecs
import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


def _strip_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


class FrameSplitter:
    """Reassembles newline-delimited lines from raw increments.

    Increments may be split anywhere, including inside a line or inside a
    multi-byte UTF-8 character.  Complete lines are yielded as soon as
    their newline arrives; the unterminated tail is kept in a carry buffer
    for the next call.

    Usage::

        splitter = FrameSplitter()
        list(splitter.push(b"data: a\\nda"))   # ["data: a"]
        list(splitter.push(b"ta: b\\n"))       # ["data: b"]

    Parameters:
        encoding: Codec used for ``bytes`` increments.
    """

    __slots__ = ("_buffer", "_decoder")

    def __init__(self, encoding: str = "utf-8") -> None:
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

    @property
    def pending(self) -> str:
        """The buffered, not yet newline-terminated text."""
        return self._buffer

    def push(self, increment: str | bytes) -> Iterator[str]:
        """Append *increment* and lazily yield every completed line.

        Lines are yielded without their ``\\n`` and with one trailing
        ``\\r`` removed.  Text not yet consumed by the caller stays in the
        buffer, so abandoning the iterator early loses nothing.
        """
        if isinstance(increment, bytes):
            increment = self._decoder.decode(increment)
        self._buffer += increment
        while True:
            idx = self._buffer.find("\n")
            if idx < 0:
                return
            line = self._buffer[:idx]
            self._buffer = self._buffer[idx + 1 :]
            yield _strip_cr(line)

    def flush(self) -> list[str]:
        """Drain the buffer, treating the residue as complete lines.

        Returns an empty list when nothing but whitespace is left.
        """
        self._buffer += self._decoder.decode(b"", final=True)
        residue, self._buffer = self._buffer, ""
        if not residue.strip():
            return []
        logger.debug("Flushing %d buffered characters", len(residue))
        return [_strip_cr(line) for line in residue.split("\n")]
