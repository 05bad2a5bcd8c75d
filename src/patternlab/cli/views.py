"""
CLI: ``patternlab patterns | nav | mqs``: read-only views of a session.
"""

from __future__ import annotations

from pathlib import Path

import typer

from patternlab.cli.utils import console, make_provider, print_json, print_table, report_errors


def patterns(
    project_root: Path | None = typer.Option(  # noqa: UP007
        None, "--project-root", "-p", help="Project directory holding config/ and the source tree"
    ),
    show_hidden: bool = typer.Option(False, "--hidden", help="Include hidden and meta patterns"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List discovered patterns with their effective state."""
    with report_errors():
        provider = make_provider(project_root)
        rows = [
            {
                "partial": p.partial,
                "path": p.path_dash,
                "state": provider.get_state(p),
                "lineage": ", ".join(p.lineages),
            }
            for p in provider.patterns()
            if show_hidden or not p.hidden
        ]

    if as_json:
        print_json(rows)
        return
    print_table(rows, title="Patterns")


def nav(
    project_root: Path | None = typer.Option(  # noqa: UP007
        None, "--project-root", "-p", help="Project directory holding config/ and the source tree"
    ),
) -> None:
    """Print the navigation taxonomy as JSON."""
    with report_errors():
        taxonomy = make_provider(project_root).taxonomy()
    print_json(taxonomy.to_dict())


def mqs(
    project_root: Path | None = typer.Option(  # noqa: UP007
        None, "--project-root", "-p", help="Project directory holding config/ and the source tree"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the responsive breakpoints found in the source stylesheets."""
    with report_errors():
        media_queries = make_provider(project_root).media_queries()

    if as_json:
        print_json(media_queries)
        return
    if not media_queries:
        console.print("[dim]No media queries found.[/dim]")
        return
    for media_query in media_queries:
        console.print(media_query)
