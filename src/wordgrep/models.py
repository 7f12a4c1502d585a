"""Core WordGrep data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

Match = str
GrepResult = Dict[Path, List[Match]]


@dataclass(slots=True)
class FileResult:
    """Outcome of extracting and searching a single document."""

    path: Path
    matches: List[Match] = field(default_factory=list)
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
