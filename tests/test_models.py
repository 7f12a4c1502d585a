"""Tests for core data models."""

from __future__ import annotations

from pathlib import Path

from wordgrep.models import FileResult


class TestFileResult:
    """Test FileResult dataclass."""

    def test_defaults(self) -> None:
        """Should start with no matches and no error."""
        result = FileResult(path=Path("/a.docx"))

        assert result.matches == []
        assert result.error is None
        assert result.failed is False

    def test_failed(self) -> None:
        """Should report failure when an error is set."""
        result = FileResult(path=Path("/a.docx"), error="boom")

        assert result.failed is True

    def test_equality(self) -> None:
        """Should compare by value."""
        assert FileResult(Path("/a.docx"), ["x"]) == FileResult(Path("/a.docx"), ["x"])
        assert FileResult(Path("/a.docx"), ["x"]) != FileResult(Path("/b.docx"), ["x"])
