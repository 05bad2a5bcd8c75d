"""
Root Typer application for the patternlab CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from patternlab import __version__
from patternlab.core.logging import configure_logging
from patternlab.core.settings import get_settings

app = Typer(
    name="patternlab",
    help="patternlab: compile a pattern tree into a browsable pattern library.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"patternlab {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """patternlab CLI: build, inspect patterns, navigation and breakpoints."""
    settings = get_settings()
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_format=settings.json_logs,
    )


# ── Sub-command registration ─────────────────────────────────────────────

from patternlab.cli.build import build  # noqa: E402
from patternlab.cli.config import app as config_app  # noqa: E402
from patternlab.cli.views import mqs, nav, patterns  # noqa: E402

app.command("build")(build)
app.command("patterns")(patterns)
app.command("nav")(nav)
app.command("mqs")(mqs)
app.add_typer(config_app, name="config", help="Configuration inspection.")
