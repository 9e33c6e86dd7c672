"""Tests for sse_delta.models.config -- DecoderConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sse_delta.models.config import DecoderConfig


class TestDecoderConfig:
    """Defaults and validation."""

    def test_defaults(self) -> None:
        config = DecoderConfig()
        assert config.data_prefix == "data:"
        assert config.comment_marker == ":"
        assert config.sentinel == "[DONE]"
        assert config.content_path == ("choices", 0, "delta", "content")
        assert config.encoding == "utf-8"
        assert config.strict_trailing_payload is False

    def test_path_keeps_integer_segments(self) -> None:
        config = DecoderConfig(content_path=["choices", 1, "delta", "content"])
        assert config.content_path == ("choices", 1, "delta", "content")
        assert isinstance(config.content_path[1], int)

    def test_frozen(self) -> None:
        config = DecoderConfig()
        with pytest.raises(ValidationError):
            config.sentinel = "END"  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["data_prefix", "comment_marker", "sentinel"])
    def test_empty_markers_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            DecoderConfig(**{field: ""})

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one segment"):
            DecoderConfig(content_path=())

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown encoding"):
            DecoderConfig(encoding="not-a-codec")

    def test_carry_limit_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            DecoderConfig(max_payload_carry=0)
