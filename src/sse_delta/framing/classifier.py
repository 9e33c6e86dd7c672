"""Line classification for the event-stream wire format."""

from __future__ import annotations

from sse_delta.models.config import DecoderConfig
from sse_delta.models.frames import Frame, FrameKind


class EventClassifier:
    """Tags each line as blank, comment, data or unrecognized.

    Rules are applied in that order.  Only data frames carry a payload:
    the line with the data prefix removed and surrounding whitespace
    trimmed.  Other SSE fields (``event:``, ``id:``, ``retry:``) are
    unrecognized and never reach the payload decoder.
    """

    __slots__ = ("_comment_marker", "_data_prefix")

    def __init__(self, config: DecoderConfig | None = None) -> None:
        config = config or DecoderConfig()
        self._data_prefix = config.data_prefix
        self._comment_marker = config.comment_marker

    def classify(self, line: str) -> Frame:
        if not line.strip():
            return Frame(kind=FrameKind.BLANK, line=line)
        if line.startswith(self._comment_marker):
            return Frame(kind=FrameKind.COMMENT, line=line)
        if line.startswith(self._data_prefix):
            payload = line[len(self._data_prefix) :].strip()
            return Frame(kind=FrameKind.DATA, line=line, payload=payload)
        return Frame(kind=FrameKind.UNRECOGNIZED, line=line)
