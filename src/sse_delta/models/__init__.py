"""Data models for sse-delta."""

from .config import DecoderConfig, PathSegment
from .decoding import DecodeKind, DecodeResult
from .frames import Frame, FrameKind
from .streaming import (
    DoneEvent,
    ErrorEvent,
    FragmentEvent,
    StreamEvent,
    StreamOutcome,
    StreamResult,
    StreamState,
    StreamUsage,
)

__all__ = [
    "DecodeKind",
    "DecodeResult",
    "DecoderConfig",
    "DoneEvent",
    "ErrorEvent",
    "Frame",
    "FrameKind",
    "FragmentEvent",
    "PathSegment",
    "StreamEvent",
    "StreamOutcome",
    "StreamResult",
    "StreamState",
    "StreamUsage",
]
