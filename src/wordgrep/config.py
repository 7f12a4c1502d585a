"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_EXTENSIONS = (".docx", ".doc")
LOCK_FILE_PREFIX = "~$"
PLAIN_ENV_VARS = ("WORDGREP_PLAIN", "NO_COLOR")


def _plain_from_env() -> bool:
    """Return True when the environment asks for uncoloured output."""
    return any(os.environ.get(name) for name in PLAIN_ENV_VARS)


@dataclass(slots=True)
class AppConfig:
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    lock_prefix: str = LOCK_FILE_PREFIX
    context_radius: int = 50
    max_workers: int | None = None
    extract_timeout: float | None = 60.0
    plain: bool | None = None

    def __post_init__(self) -> None:
        if self.plain is None:
            self.plain = _plain_from_env()
        self.extensions = tuple(ext.lower() for ext in self.extensions)
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
