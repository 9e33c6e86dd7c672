"""Line classification models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class FrameKind(StrEnum):
    """What a single wire line turned out to be."""

    BLANK = "blank"
    COMMENT = "comment"
    DATA = "data"
    UNRECOGNIZED = "unrecognized"


class Frame(BaseModel):
    """A classified line.  Only ``DATA`` frames carry a payload."""

    model_config = ConfigDict(frozen=True)

    kind: FrameKind
    line: str = ""
    payload: str | None = None

    @property
    def is_data(self) -> bool:
        return self.kind is FrameKind.DATA
