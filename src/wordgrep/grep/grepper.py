"""Concurrent literal search over Word documents."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Sequence

from wordgrep.config import AppConfig
from wordgrep.ingestion.word_loader import ExtractionError, extract_text
from wordgrep.models import FileResult, GrepResult
from wordgrep.utils.files import scan_tree
from wordgrep.utils.text import find_snippets

LOGGER = logging.getLogger(__name__)

Extractor = Callable[..., str]


@dataclass(slots=True)
class GrepStats:
    scanned: int = 0
    matched: int = 0
    failed: int = 0
    failed_files: list[Path] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        self.scanned += 1
        if result.failed:
            self.failed += 1
            self.failed_files.append(result.path)
        elif result.matches:
            self.matched += 1


class Grepper:
    """Fans extraction and search out over a thread pool and gathers the results."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        extractor: Extractor = extract_text,
    ) -> None:
        self.config = config or AppConfig()
        self.extractor = extractor
        self.stats = GrepStats()

    def grep(self, pattern: str, files: Sequence[Path]) -> GrepResult:
        """Search every file for ``pattern`` and map matching paths to their snippets.

        Worker threads only build their own ``FileResult``; the calling thread
        is the sole writer of the returned mapping.
        """
        result: GrepResult = {}
        if not pattern or not files:
            return result

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {
                executor.submit(self._grep_single, pattern, Path(path)): Path(path)
                for path in files
            }
            for future in as_completed(futures):
                path = futures[future]
                try:
                    file_result = future.result()
                except Exception as exc:
                    LOGGER.error("Failed to process %s: %s", path, exc)
                    file_result = FileResult(path=path, error=str(exc))

                self.stats.record(file_result)
                if file_result.matches:
                    result[file_result.path] = file_result.matches
        return result

    def grep_roots(self, pattern: str, roots: Iterable[Path]) -> GrepResult:
        """Scan and search each root in turn, merging the per-root results."""
        collected: GrepResult = {}
        for root in roots:
            root = Path(root)
            if not root.is_dir():
                LOGGER.warning("Not a directory, skipping: %s", root)
                continue
            files = scan_tree(
                root,
                extensions=self.config.extensions,
                lock_prefix=self.config.lock_prefix,
            )
            LOGGER.debug("Found %d documents under %s", len(files), root)
            collected.update(self.grep(pattern, files))
        return collected

    def _grep_single(self, pattern: str, path: Path) -> FileResult:
        try:
            text = self.extractor(path, timeout=self.config.extract_timeout)
        except ExtractionError as exc:
            LOGGER.warning("Error while extracting %s: %s", path, exc)
            return FileResult(path=path, error=str(exc))
        return FileResult(
            path=path,
            matches=find_snippets(text, pattern, radius=self.config.context_radius),
        )
