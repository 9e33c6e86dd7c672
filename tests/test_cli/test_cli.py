"""Tests for sse_delta.cli.

Exercises the Typer CLI app via CliRunner, covering the version flag,
the info command, and replaying captured transcripts with decode.
"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from sse_delta import __version__
from sse_delta.cli import app
from tests.conftest import build_transcript, data_line

runner = CliRunner()


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "capture.sse"
    path.write_text(text, encoding="utf-8")
    return path


class TestMainCallback:
    """The root callback with --version flag."""

    def test_version_flag_prints_version_and_exits(self) -> None:
        result = runner.invoke(app, ["--version", "info"])
        assert result.exit_code == 0
        assert "sse-delta" in result.output
        assert __version__ in result.output

    def test_no_subcommand_exits_with_error(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 2


class TestInfo:
    """The info command."""

    def test_lists_dependencies(self) -> None:
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "pydantic" in result.output
        assert "Python" in result.output


class TestDecode:
    """Replaying a captured stream."""

    def test_decode_prints_text_and_summary(self, tmp_path: Path) -> None:
        path = _write(tmp_path, build_transcript(["Hello", ", ", "world"]))
        result = runner.invoke(app, ["decode", str(path), "--chunk-size", "5"])
        assert result.exit_code == 0
        assert "Hello, world" in result.output
        assert "completed" in result.output
        assert "Fragments" in result.output

    def test_raw_output_has_no_summary(self, tmp_path: Path) -> None:
        path = _write(tmp_path, build_transcript(["only text"]))
        result = runner.invoke(app, ["decode", str(path), "--raw"])
        assert result.exit_code == 0
        assert "only text" in result.output
        assert "stream summary" not in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["decode", str(tmp_path / "missing.sse")])
        assert result.exit_code == 1

    def test_strict_mode_fails_on_truncated_capture(self, tmp_path: Path) -> None:
        path = _write(tmp_path, data_line("ok") + 'data: {"choices":[')
        result = runner.invoke(app, ["decode", str(path), "--strict"])
        assert result.exit_code == 1
        assert "ok" in result.output

    def test_truncated_capture_completes_by_default(self, tmp_path: Path) -> None:
        path = _write(tmp_path, data_line("ok") + 'data: {"choices":[')
        result = runner.invoke(app, ["decode", str(path)])
        assert result.exit_code == 0

    def test_invalid_chunk_size(self, tmp_path: Path) -> None:
        path = _write(tmp_path, build_transcript(["x"]))
        result = runner.invoke(app, ["decode", str(path), "--chunk-size", "0"])
        assert result.exit_code == 2
