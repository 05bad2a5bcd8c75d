"""
CLI: ``patternlab build``: export the pattern library to the public directory.
"""

from __future__ import annotations

from pathlib import Path

import typer

from patternlab.builder import StaticBuilder
from patternlab.cli.utils import console, err_console, make_provider, print_dict, report_errors


def build(
    project_root: Path | None = typer.Option(  # noqa: UP007
        None, "--project-root", "-p", help="Project directory holding config/ and the source tree"
    ),
    output_dir: Path | None = typer.Option(  # noqa: UP007
        None, "--output-dir", "-o", help="Export directory (defaults to the publicDir setting)"
    ),
    no_cache: bool = typer.Option(False, "--no-cache", help="Disable the cache buster token"),
) -> None:
    """Render every pattern and write the static pattern library."""
    with report_errors():
        provider = make_provider(project_root, no_cache=no_cache)
        result = StaticBuilder(provider, output_dir).build()

    print_dict(
        {
            "output": result.output_dir,
            "patterns": result.patterns_rendered,
            "view all pages": result.view_all_pages,
            "assets": result.assets_copied,
            "bytes": f"{result.bytes_written:,}",
        },
        title="Build complete" if result.success else "Build finished with errors",
    )

    if not result.success:
        for error in result.errors:
            err_console.print(f"  [red]✗[/red] {error}")
        raise typer.Exit(code=1)

    console.print("[green]✓[/green] Pattern library exported")
