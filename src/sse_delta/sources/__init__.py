"""Stream sources: in-memory replay and the ``httpx`` response adapter."""

from .httpx_source import HttpxSource
from .memory import IterableSource, chunk_text

__all__ = ["HttpxSource", "IterableSource", "chunk_text"]
