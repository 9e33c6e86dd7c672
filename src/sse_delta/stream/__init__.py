"""Stream driving: controller, cancellation, sinks and event iteration."""

from .callbacks import StreamCallback
from .cancellation import CancellationToken
from .controller import (
    CONNECTIVITY_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
    INCOMPLETE_PAYLOAD_MESSAGE,
    NO_STREAM_MESSAGE,
    StreamController,
    error_message_from_body,
)
from .events import aiter_events, collect
from .sinks import CollectingSink

__all__ = [
    "CONNECTIVITY_MESSAGE",
    "GENERIC_FAILURE_MESSAGE",
    "INCOMPLETE_PAYLOAD_MESSAGE",
    "NO_STREAM_MESSAGE",
    "CancellationToken",
    "CollectingSink",
    "StreamCallback",
    "StreamController",
    "aiter_events",
    "collect",
    "error_message_from_body",
]
