"""Plain-text extraction for Word documents.

``.docx`` packages are read with python-docx. Legacy binary ``.doc`` files are
converted by the ``antiword`` executable, which must be on ``PATH``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import zipfile
from pathlib import Path

from docx import Document as DocxDocument
from docx.table import Table

LOGGER = logging.getLogger(__name__)

ANTIWORD_CANDIDATES = ("antiword", "antiword.exe")


class ExtractionError(RuntimeError):
    """Raised when a document's text cannot be extracted."""


class WrongFormatError(ExtractionError):
    """Raised when a file holds the other Word format than its extension claims."""


def _block_lines(container) -> list[str]:
    """Paragraph text and tab-joined table rows of a body, header or footer, in order."""
    lines: list[str] = []
    for block in container.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                lines.append("\t".join(cell.text for cell in row.cells))
        else:
            lines.append(block.text)
    return lines


def docx_to_text(path: Path) -> str:
    """Return the text of a ``.docx`` package.

    Section headers come first, then the body with paragraphs and table rows
    in document order, then section footers. Headers and footers linked to
    the previous section are not repeated.
    """
    if not zipfile.is_zipfile(path):
        raise WrongFormatError(f"{path} is not an OOXML package")
    try:
        document = DocxDocument(str(path))
    except Exception as exc:
        raise ExtractionError(f"Failed to open {path}: {exc}") from exc

    headers: list[str] = []
    footers: list[str] = []
    for section in document.sections:
        if not section.header.is_linked_to_previous:
            headers.extend(_block_lines(section.header))
        if not section.footer.is_linked_to_previous:
            footers.extend(_block_lines(section.footer))
    return "\n".join(headers + _block_lines(document) + footers)


def _find_antiword() -> str | None:
    for candidate in ANTIWORD_CANDIDATES:
        found = shutil.which(candidate)
        if found:
            return found
    return None


def doc_to_text(path: Path, *, timeout: float | None = None) -> str:
    """Convert a legacy binary ``.doc`` file to text with antiword.

    antiword's diagnostics go to its captured stderr and are logged at DEBUG.
    """
    if zipfile.is_zipfile(path):
        raise WrongFormatError(f"{path} is an OOXML package, not a binary .doc")

    antiword = _find_antiword()
    if antiword is None:
        raise ExtractionError("antiword is required to read .doc files but was not found on PATH")

    target = str(Path(path).absolute())
    commands = [
        [antiword, "-m", "UTF-8.txt", target],
        [antiword, target],
    ]
    failure = f"antiword failed on {path}"
    for command in commands:
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExtractionError(f"antiword timed out after {timeout}s on {path}") from exc
        except OSError as exc:
            raise ExtractionError(f"Failed to launch antiword: {exc}") from exc

        if completed.stderr and completed.stderr.strip():
            LOGGER.debug("antiword on %s: %s", path, completed.stderr.strip())
        if completed.returncode == 0:
            return (completed.stdout or "").replace("\r\n", "\n")
        message = (completed.stderr or completed.stdout or "").strip()
        failure = f"antiword exited with status {completed.returncode} on {path}: {message}"

    raise ExtractionError(failure)


def extract_text(path: Path, *, timeout: float | None = None) -> str:
    """Extract the full text of a Word document, dispatching on its extension.

    Unsupported extensions give an empty string. When the parser chosen by the
    extension reports the file is really the other Word format, the alternate
    parser is tried once; its errors propagate as ``ExtractionError``.
    """
    path = Path(path)
    name = path.name.lower()
    if name.endswith(".docx"):
        primary, fallback = "docx", "doc"
    elif name.endswith(".doc"):
        primary, fallback = "doc", "docx"
    else:
        return ""

    try:
        return _extract_as(primary, path, timeout)
    except WrongFormatError as exc:
        LOGGER.warning("Document type mismatch for %s (%s), treating as .%s", path, exc, fallback)
    return _extract_as(fallback, path, timeout)


def _extract_as(kind: str, path: Path, timeout: float | None) -> str:
    if kind == "docx":
        return docx_to_text(path)
    return doc_to_text(path, timeout=timeout)
