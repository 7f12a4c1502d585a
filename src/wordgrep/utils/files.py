"""Utility helpers for discovering documents on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from wordgrep.config import DEFAULT_EXTENSIONS, LOCK_FILE_PREFIX

LOGGER = logging.getLogger(__name__)


def is_document_name(
    name: str,
    *,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    lock_prefix: str = LOCK_FILE_PREFIX,
) -> bool:
    """Return True for a Word document name that is not an owner lock file."""
    if lock_prefix and name.startswith(lock_prefix):
        return False
    normalized = name.lower()
    return any(normalized.endswith(ext) for ext in extensions)


def scan_tree(
    root: Path,
    *,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    lock_prefix: str = LOCK_FILE_PREFIX,
) -> list[Path]:
    """Collect document paths under ``root``, descending into every subdirectory.

    Directories are walked with an explicit stack. A root that is missing or is
    not a directory gives an empty list, and a subdirectory that cannot be
    listed is skipped with a warning while its siblings are still scanned.
    Symlinked directories are followed, so a symlink cycle is not detected.
    """
    root = Path(root).absolute()
    if not root.is_dir():
        return []

    documents: list[Path] = []
    pending = [root]
    while pending:
        current = pending.pop()
        try:
            entries = list(current.iterdir())
        except OSError as exc:
            LOGGER.warning("Cannot read directory %s: %s", current, exc)
            continue

        for entry in entries:
            try:
                if entry.is_dir():
                    pending.append(entry)
                elif entry.is_file() and is_document_name(
                    entry.name, extensions=extensions, lock_prefix=lock_prefix
                ):
                    documents.append(entry)
            except OSError as exc:  # pragma: no cover - stat race
                LOGGER.debug("Skipping %s: %s", entry, exc)
    return documents

