"""Command line interface for WordGrep."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.text import Text

from wordgrep.config import AppConfig
from wordgrep.grep.grepper import Grepper
from wordgrep.models import GrepResult


app = typer.Typer(help="WordGrep - search Word documents for literal text", add_completion=False)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _make_console(plain: bool) -> Console:
    if plain:
        return Console(no_color=True, highlight=False)
    return Console(highlight=False)


def render_report(result: GrepResult, pattern: str, console: Console) -> None:
    """Print each matching file followed by its snippets and a blank line."""
    for path, snippets in result.items():
        console.print(Text(str(path), style="cyan"), soft_wrap=True)
        for snippet in snippets:
            body = Text(snippet)
            body.highlight_words([pattern], style="bold red", case_sensitive=True)
            console.print(Text.assemble("...", body, "..."), soft_wrap=True)
        console.print()


@app.command()
def grep(
    pattern: Optional[str] = typer.Argument(None, help="Literal text to search for."),
    roots: Optional[List[Path]] = typer.Argument(
        None, help="Directories to scan. Defaults to the current directory."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Number of worker threads"
    ),
    timeout: float = typer.Option(
        AppConfig().extract_timeout, "--timeout", help="Seconds allowed per .doc conversion"
    ),
    plain: bool = typer.Option(False, "--plain", help="Disable coloured output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search .docx and .doc files under the given directories.

    Put a pattern that starts with a dash after "--", e.g. "wordgrep -- -v ~/docs".
    """
    if pattern is None:
        return

    _setup_logging(verbose)
    config = AppConfig(
        max_workers=workers,
        extract_timeout=timeout,
        plain=True if plain else None,
    )
    console = _make_console(config.plain)

    targets = list(roots) if roots else [Path.cwd()]
    grepper = Grepper(config)
    result = grepper.grep_roots(pattern, [target.absolute() for target in targets])

    if not result:
        console.print("[yellow]No matches found.[/yellow]")
    else:
        render_report(result, pattern, console)

    if verbose:
        stats = grepper.stats
        console.print(
            f"Scanned: {stats.scanned}, matched: {stats.matched}, failed: {stats.failed}"
        )
