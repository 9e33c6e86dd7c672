"""Stream lifecycle, result and event models."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class StreamState(StrEnum):
    """Controller lifecycle.  The last three states are terminal."""

    IDLE = "idle"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class StreamOutcome(StrEnum):
    """Terminal result of one stream."""

    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class StreamUsage(BaseModel):
    """Token usage reported by the provider on its final chunk."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class StreamResult(BaseModel):
    """Summary of a finished stream.

    ``text`` is filled only by :func:`~sse_delta.stream.events.collect`;
    the controller itself retains no fragment text.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    outcome: StreamOutcome
    fragment_count: int = 0
    text: str = ""
    error_message: str | None = None
    error: Exception | None = Field(default=None, exclude=True)
    model: str = ""
    finish_reason: str = ""
    usage: StreamUsage | None = None
    duration_ms: float = 0.0


class FragmentEvent(BaseModel):
    """A piece of generated content."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fragment"] = "fragment"
    text: str


class DoneEvent(BaseModel):
    """The stream completed normally."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["done"] = "done"


class ErrorEvent(BaseModel):
    """The stream failed; no further events follow."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


StreamEvent = Annotated[FragmentEvent | DoneEvent | ErrorEvent, Field(discriminator="kind")]
