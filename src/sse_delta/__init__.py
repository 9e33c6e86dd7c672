"""sse-delta: incremental decoder for streamed chat completion responses.

Decoding:
    StreamDecoder, FrameSplitter, EventClassifier, PayloadDecoder,
    decode_text, extract_path

Streaming:
    StreamController, CancellationToken, CollectingSink, StreamCallback,
    aiter_events, collect, error_message_from_body

Sources & Protocols:
    IterableSource, HttpxSource, chunk_text, StreamSource, StreamSink,
    MetricsCollector

Models & Types:
    DecoderConfig, Frame, FrameKind, DecodeKind, DecodeResult,
    StreamState, StreamOutcome, StreamResult, StreamUsage,
    FragmentEvent, DoneEvent, ErrorEvent, StreamEvent

Observability:
    MetricsCallback, MetricPoint, InMemoryMetricsCollector,
    LoggingMetricsCollector

Exceptions:
    SseDeltaError, PreStreamError, NoStreamError, StreamTransportError,
    IncompletePayloadError, StreamStateError
"""

from importlib.metadata import PackageNotFoundError, version

from sse_delta.decoding import PayloadDecoder, StreamDecoder, decode_text, extract_path
from sse_delta.exceptions import (
    IncompletePayloadError,
    NoStreamError,
    PreStreamError,
    SseDeltaError,
    StreamStateError,
    StreamTransportError,
)
from sse_delta.framing import EventClassifier, FrameSplitter
from sse_delta.models import (
    DecodeKind,
    DecodeResult,
    DecoderConfig,
    DoneEvent,
    ErrorEvent,
    FragmentEvent,
    Frame,
    FrameKind,
    StreamEvent,
    StreamOutcome,
    StreamResult,
    StreamState,
    StreamUsage,
)
from sse_delta.observability import (
    InMemoryMetricsCollector,
    LoggingMetricsCollector,
    MetricPoint,
    MetricsCallback,
)
from sse_delta.protocols import MetricsCollector, StreamSink, StreamSource
from sse_delta.sources import HttpxSource, IterableSource, chunk_text
from sse_delta.stream import (
    CancellationToken,
    CollectingSink,
    StreamCallback,
    StreamController,
    aiter_events,
    collect,
    error_message_from_body,
)

try:
    __version__ = version("sse-delta")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "CancellationToken",
    "CollectingSink",
    "DecodeKind",
    "DecodeResult",
    "DecoderConfig",
    "DoneEvent",
    "ErrorEvent",
    "EventClassifier",
    "FragmentEvent",
    "Frame",
    "FrameKind",
    "FrameSplitter",
    "HttpxSource",
    "InMemoryMetricsCollector",
    "IncompletePayloadError",
    "IterableSource",
    "LoggingMetricsCollector",
    "MetricPoint",
    "MetricsCallback",
    "MetricsCollector",
    "NoStreamError",
    "PayloadDecoder",
    "PreStreamError",
    "SseDeltaError",
    "StreamCallback",
    "StreamController",
    "StreamDecoder",
    "StreamEvent",
    "StreamOutcome",
    "StreamResult",
    "StreamSink",
    "StreamSource",
    "StreamState",
    "StreamStateError",
    "StreamTransportError",
    "StreamUsage",
    "aiter_events",
    "chunk_text",
    "collect",
    "decode_text",
    "error_message_from_body",
    "extract_path",
]
