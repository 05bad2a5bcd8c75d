"""
CLI: ``patternlab config``: inspect the project and process configuration.
"""

from __future__ import annotations

from pathlib import Path

import typer

from patternlab.cli.utils import console, make_provider, print_dict, print_json, report_errors
from patternlab.core.settings import get_settings

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show_config(
    project_root: Path | None = typer.Option(  # noqa: UP007
        None, "--project-root", "-p", help="Project directory holding config/ and the source tree"
    ),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
) -> None:
    """Show the project's config.ini settings (created from defaults when missing)."""
    with report_errors():
        provider = make_provider(project_root)
        settings = provider.config()

    if format == "json":
        print_json(settings)
        return

    console.print(f"[bold]Project Root:[/bold] {provider.project_root}")
    console.print(f"[bold]Engine:[/bold] {provider.pattern_engine().name()}")
    print_dict(settings, title="\nSettings:")


@app.command("env")
def show_env() -> None:
    """Show the process settings read from PATTERNLAB_* variables."""
    settings = get_settings()
    for key, value in sorted(settings.model_dump().items()):
        console.print(f"PATTERNLAB_{key.upper()}={value}")
