"""Custom exceptions for sse-delta."""

from __future__ import annotations

__all__ = [
    "IncompletePayloadError",
    "NoStreamError",
    "PreStreamError",
    "SseDeltaError",
    "StreamStateError",
    "StreamTransportError",
]


class SseDeltaError(Exception):
    """Base exception for all sse-delta errors."""


class PreStreamError(SseDeltaError):
    """The source reported a non-success status before any bytes streamed."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoStreamError(SseDeltaError):
    """Raised when a successful response carries no readable body."""


class StreamTransportError(SseDeltaError):
    """The connection dropped or a read failed mid-stream."""


class IncompletePayloadError(SseDeltaError):
    """The stream ended while a data payload was still incomplete.

    Only reported when ``DecoderConfig.strict_trailing_payload`` is set.
    """

    def __init__(self, message: str, payload: str) -> None:
        super().__init__(message)
        self.payload = payload


class StreamStateError(SseDeltaError):
    """Raised when a controller is driven outside its lifecycle."""
