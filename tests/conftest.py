"""
Shared pytest fixtures for patternlab tests.

This module provides:
- A small but complete project tree (config, meta, patterns, data, styles)
- A PatternProvider bound to that tree
- Structlog reset between tests

Usage:
    def test_something(provider):
        assert provider.get_pattern("atoms-button").state == "complete"
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog

from patternlab.core.settings import clear_settings_cache
from patternlab.provider import PatternProvider

CONFIG_TEXT = """\
; test project
patternEngine = "jinja2"
sourceDir = "source"
publicDir = "public"
id = "scss,node_modules"
ie = "scss,DS_Store"
ishMinimum = "240"
ishMaximum = "2600"
ishControlsHide = "hay"
patternStates = "inprogress,inreview,complete"
cacheBusterOn = "false"
"""

PATTERN_FILES = {
    "_meta/_00-head.jinja": '<html><body class="{{ patternPartial }}">',
    "_meta/_01-foot.jinja": "</body></html>",
    "_patterns/00-atoms/00-global/00-colors.jinja": (
        '<ul class="colors">{% for c in colors %}<li>{{ c }}</li>{% endfor %}</ul>'
    ),
    "_patterns/00-atoms/01-forms/00-button@complete.jinja": (
        "<button>{{ label }}{# ~emphasis #}<strong>!</strong>{# /~emphasis #}</button>"
    ),
    "_patterns/01-molecules/00-forms/00-search@inreview.jinja": (
        '<form>{% include "atoms-button" %}</form>'
    ),
    "_patterns/02-pages/00-homepage.jinja": (
        '<main>{% include "molecules-search" %}{% include "atoms-colors" %}</main>'
    ),
    "_patterns/02-pages/_01-draft@inprogress.jinja": "<p>draft</p>",
}


def write_file(path: Path, content: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    """Give each test default structlog config and fresh process settings."""
    structlog.reset_defaults()
    clear_settings_cache()
    yield
    structlog.reset_defaults()
    clear_settings_cache()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project with patterns, data, stylesheets and assets under ``source/``."""
    root = tmp_path / "project"
    source = root / "source"

    write_file(root / "config" / "config.ini", CONFIG_TEXT)

    for relative, content in PATTERN_FILES.items():
        write_file(source / relative, content)

    write_file(
        source / "_patterns/00-atoms/01-forms/00-button@complete.json",
        json.dumps({"label": "Go"}),
    )

    write_file(
        source / "_data" / "data.json",
        json.dumps(
            {
                "title": "Library",
                "colors": ["red", "green"],
                "listItems": ["a", "b", "c"],
            }
        ),
    )
    write_file(source / "_data" / "zz.yaml", "title: Override\nfooter: yes\n")

    write_file(
        source / "css" / "style.css",
        "@media (min-width: 768px) { a {} }\n"
        "@media (max-width:480px) { b {} }\n"
        "@media (min-width: 768px) { c {} }\n",
    )
    write_file(source / "scss" / "ignored.css", "@media (min-width: 1200px) { d {} }\n")
    write_file(source / "images" / "logo.png", b"\x89PNG\r\n")
    write_file(source / "README", "not exported")

    return root


@pytest.fixture
def provider(project_root: Path) -> PatternProvider:
    return PatternProvider(project_root)
