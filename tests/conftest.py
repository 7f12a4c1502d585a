"""Shared fixtures for WordGrep tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from docx import Document


@pytest.fixture
def make_docx() -> Callable[..., Path]:
    """Return a factory that writes a real .docx with the given paragraphs."""

    def _make(path: Path, *paragraphs: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        document = Document()
        for paragraph in paragraphs:
            document.add_paragraph(paragraph)
        document.save(str(path))
        return path

    return _make
