"""Tests for top-level package exports."""

from __future__ import annotations

import sse_delta


class TestTopLevelExports:
    """Verify all expected symbols are importable from the top-level package."""

    def test_decoding_exports(self) -> None:
        from sse_delta import (
            EventClassifier,
            FrameSplitter,
            PayloadDecoder,
            StreamDecoder,
            decode_text,
            extract_path,
        )

        assert EventClassifier is not None
        assert FrameSplitter is not None
        assert PayloadDecoder is not None
        assert StreamDecoder is not None
        assert decode_text is not None
        assert extract_path is not None

    def test_stream_exports(self) -> None:
        from sse_delta import (
            CancellationToken,
            CollectingSink,
            StreamCallback,
            StreamController,
            aiter_events,
            collect,
        )

        assert CancellationToken is not None
        assert CollectingSink is not None
        assert StreamCallback is not None
        assert StreamController is not None
        assert aiter_events is not None
        assert collect is not None

    def test_exception_hierarchy(self) -> None:
        from sse_delta import (
            IncompletePayloadError,
            NoStreamError,
            PreStreamError,
            SseDeltaError,
            StreamStateError,
            StreamTransportError,
        )

        for exc in (
            IncompletePayloadError,
            NoStreamError,
            PreStreamError,
            StreamStateError,
            StreamTransportError,
        ):
            assert issubclass(exc, SseDeltaError)

    def test_all_names_resolve(self) -> None:
        for name in sse_delta.__all__:
            assert hasattr(sse_delta, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(sse_delta.__version__, str)
