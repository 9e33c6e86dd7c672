"""Decoder configuration model."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Index into the choices array or key into a nested object.
PathSegment = str | int


class DecoderConfig(BaseModel):
    """Wire-format settings for one decoder instance.

    The defaults match the OpenAI-compatible chat completion stream::

        data: {"choices":[{"delta":{"content":"Hel"}}]}

        data: [DONE]

    Parameters:
        data_prefix: Marker that starts a data-frame line.
        comment_marker: Marker that starts a comment (keep-alive) line.
        sentinel: Payload value that ends the stream logically.
        content_path: Keys and indices leading from the parsed record to the
            incremental text field.
        encoding: Text encoding used to decode byte increments.
        max_payload_carry: Maximum size in characters of a buffered
            incomplete payload before it is discarded.
        strict_trailing_payload: Report an incomplete payload left at the end
            of the stream as an error instead of dropping it.
    """

    model_config = ConfigDict(frozen=True)

    data_prefix: str = "data:"
    comment_marker: str = ":"
    sentinel: str = "[DONE]"
    content_path: tuple[PathSegment, ...] = ("choices", 0, "delta", "content")
    encoding: str = "utf-8"
    max_payload_carry: int = Field(default=1_048_576, gt=0)
    strict_trailing_payload: bool = False

    @field_validator("data_prefix", "comment_marker", "sentinel")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            msg = "marker must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("content_path")
    @classmethod
    def _path_not_empty(cls, value: tuple[PathSegment, ...]) -> tuple[PathSegment, ...]:
        if not value:
            msg = "content_path must have at least one segment"
            raise ValueError(msg)
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            msg = f"unknown encoding: {value!r}"
            raise ValueError(msg) from None
        return value
