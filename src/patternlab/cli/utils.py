"""
CLI utility helpers: provider construction, error reporting, output formatting.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from patternlab.core.errors import PatternLabError
from patternlab.core.settings import get_settings
from patternlab.provider import PatternProvider

console = Console()
err_console = Console(stderr=True)


# ── Provider helper ──────────────────────────────────────────────────────


def make_provider(project_root: Path | None = None, *, no_cache: bool = False) -> PatternProvider:
    """Create a session for ``project_root``, defaulting to ``PATTERNLAB_PROJECT_ROOT``."""
    settings = get_settings()
    root = project_root or settings.project_root
    return PatternProvider(root, no_cache=no_cache or settings.no_cache)


@contextmanager
def report_errors() -> Iterator[None]:
    """Print a ``PatternLabError`` and exit non-zero instead of a traceback."""
    try:
        yield
    except PatternLabError as e:
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {e.message}")
        context = e.context.to_dict()
        for key, value in context.items():
            err_console.print(f"  [dim]{key}[/dim]: {value}")
        raise typer.Exit(code=1) from e


# ── Output helpers ───────────────────────────────────────────────────────


def print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, default=str))


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*("" if v is None else str(v) for v in row.values()))
    console.print(table)


def print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{title}[/bold]")
    for k, v in data.items():
        console.print(f"  [cyan]{k}[/cyan]: {v}")
