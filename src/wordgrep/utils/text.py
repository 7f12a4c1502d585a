"""Text helpers for literal pattern search with context snippets."""

from __future__ import annotations

from typing import Iterator

CONTEXT_RADIUS = 50


def iter_match_positions(text: str, pattern: str) -> Iterator[int]:
    """Yield start indices of non-overlapping occurrences of ``pattern``.

    After a hit at ``i`` the search resumes at ``i + len(pattern)``, so
    ``"aa"`` in ``"aaaa"`` is reported twice, not three times.
    """
    if not pattern:
        return
    size = len(pattern)
    start = 0
    while start + size <= len(text):
        position = text.find(pattern, start)
        if position < 0:
            return
        yield position
        start = position + size


def clean_snippet(raw: str) -> str:
    """Drop carriage returns and trim surrounding whitespace."""
    return raw.replace("\r", "").strip()


def find_snippets(text: str, pattern: str, *, radius: int = CONTEXT_RADIUS) -> list[str]:
    """Return one cleaned context snippet per occurrence of ``pattern`` in ``text``.

    Each window spans ``radius`` characters either side of the occurrence,
    clamped to the text boundaries.
    """
    snippets: list[str] = []
    for position in iter_match_positions(text, pattern):
        start = max(position - radius, 0)
        end = min(position + len(pattern) + radius, len(text))
        snippets.append(clean_snippet(text[start:end]))
    return snippets
