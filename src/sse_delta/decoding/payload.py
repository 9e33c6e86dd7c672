"""Payload decoding with recovery from payloads split across data frames."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from sse_delta.models.config import DecoderConfig, PathSegment
from sse_delta.models.decoding import DecodeResult

logger = logging.getLogger(__name__)

# Data lines of one event are joined with a bare newline on the wire.
_SEPARATOR = "\n"


def _parse_record(text: str) -> dict[str, Any] | None:
    """Parse *text* as a JSON object, returning ``None`` on any failure."""
    try:
        value = json.loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def extract_path(record: Any, path: Sequence[PathSegment]) -> Any:
    """Walk *path* through nested dicts and lists.

    Returns ``None`` as soon as a key is missing, an index is out of range,
    or a segment does not fit the container type.
    """
    node = record
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            if not isinstance(node, list) or not -len(node) <= segment < len(node):
                return None
            node = node[segment]
        else:
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
    return node


class PayloadDecoder:
    """Turns data-frame payloads into fragments, sentinels or nothing.

    A payload that does not parse as a JSON object is assumed to have been
    cut by a chunk boundary.  It is kept as the *carry* and the next payload
    is appended to it (newline-joined) before parsing again, so an object
    split over several data frames still decodes into a single fragment.
    A payload that parses on its own discards any stale carry.

    Parameters:
        config: Wire-format settings; defaults to ``DecoderConfig()``.
    """

    __slots__ = ("_carry", "_config")

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config = config or DecoderConfig()
        self._carry: str | None = None

    @property
    def has_carry(self) -> bool:
        """Whether an incomplete payload is waiting for more data."""
        return self._carry is not None

    def decode(self, payload: str) -> DecodeResult:
        """Decode one data-frame payload.

        Returns a ``SENTINEL`` result for the termination literal, a
        ``FRAGMENT`` when the content path holds non-empty text, ``EMPTY``
        when there is nothing to emit yet, and ``MALFORMED`` when the carry
        outgrew ``max_payload_carry`` and was discarded.
        """
        if payload == self._config.sentinel:
            return DecodeResult.sentinel()

        record = _parse_record(payload)
        if record is not None:
            if self._carry is not None:
                logger.debug("Discarding stale payload carry of %d chars", len(self._carry))
                self._carry = None
            return self._extract(record)

        joined = payload if self._carry is None else self._carry + _SEPARATOR + payload
        record = _parse_record(joined)
        if record is not None:
            self._carry = None
            return self._extract(record)

        if len(joined) > self._config.max_payload_carry:
            logger.warning(
                "Discarding incomplete payload of %d chars (limit %d)",
                len(joined), self._config.max_payload_carry,
            )
            self._carry = None
            return DecodeResult.malformed()

        self._carry = joined
        return DecodeResult.empty()

    def finish(self) -> str | None:
        """End the stream, returning and discarding any incomplete carry."""
        carry, self._carry = self._carry, None
        return carry

    def _extract(self, record: dict[str, Any]) -> DecodeResult:
        content = extract_path(record, self._config.content_path)
        if isinstance(content, str) and content:
            return DecodeResult.fragment(content, record)
        return DecodeResult.empty(record)
