"""Protocol definitions for the collaborators around the decoder."""

from .observability import MetricsCollector
from .sink import StreamSink
from .source import StreamSource

__all__ = ["MetricsCollector", "StreamSink", "StreamSource"]
