"""Results produced by the payload decoder."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class DecodeKind(StrEnum):
    """Outcome of decoding one data-frame payload."""

    FRAGMENT = "fragment"
    SENTINEL = "sentinel"
    EMPTY = "empty"
    MALFORMED = "malformed"


class DecodeResult(BaseModel):
    """The decoded form of a data-frame payload.

    ``text`` is set only for ``FRAGMENT`` results.  ``record`` holds the
    parsed JSON object whenever parsing succeeded, including control frames
    that carry no content (finish reasons, usage totals).
    """

    model_config = ConfigDict(frozen=True)

    kind: DecodeKind
    text: str | None = None
    record: dict[str, Any] | None = None

    @classmethod
    def fragment(cls, text: str, record: dict[str, Any] | None = None) -> DecodeResult:
        return cls(kind=DecodeKind.FRAGMENT, text=text, record=record)

    @classmethod
    def sentinel(cls) -> DecodeResult:
        return cls(kind=DecodeKind.SENTINEL)

    @classmethod
    def empty(cls, record: dict[str, Any] | None = None) -> DecodeResult:
        return cls(kind=DecodeKind.EMPTY, record=record)

    @classmethod
    def malformed(cls) -> DecodeResult:
        return cls(kind=DecodeKind.MALFORMED)
