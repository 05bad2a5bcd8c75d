"""
Jinja2 template engine.

Patterns include each other with ``{% include "atoms-button" %}`` (any
lookup term accepted by ``find_pattern`` works). Pseudo-pattern variants are
sections of the pattern body fenced by comment markers::

    <button class="btn">
      {# ~emphasis #}<strong>{{ label }}</strong>{# /~emphasis #}
    </button>

The base pattern renders with every section removed; the ``~emphasis``
variant renders with that section's content kept in place and the other
sections removed.

Tags:
    template-engine, jinja2, patternlab

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, FunctionLoader, TemplateError, select_autoescape

from patternlab.core.errors import RenderError
from patternlab.engines.base import PartialSource

_LINEAGE_RE = re.compile(
    r"""\{%-?\s*(?:include|import|extends|from)\s+["']([^"']+)["']"""
)

_PSEUDO_RE = re.compile(
    r"\{#-?\s*~(?P<name>[\w.-]+)\s*-?#\}(?P<body>.*?)\{#-?\s*/~(?P=name)\s*-?#\}",
    re.DOTALL,
)


class Jinja2PatternEngine:
    """Renders ``.jinja`` patterns with Jinja2."""

    def __init__(self, extension: str = ".jinja"):
        self._extension = extension

    def name(self) -> str:
        return "jinja2"

    def extension(self) -> str:
        return self._extension

    def render(
        self,
        template: str,
        context: Mapping[str, Any],
        partials: PartialSource | None = None,
    ) -> str:
        env = Environment(
            loader=FunctionLoader(partials) if partials is not None else None,
            autoescape=select_autoescape(
                ["html", "xml"], default_for_string=True, default=True
            ),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        try:
            return env.from_string(template).render(**context)
        except TemplateError as e:
            raise RenderError(f"Jinja2 failed to render template: {e}", cause=e).with_context(
                engine=self.name()
            ) from e

    def find_lineages(self, template: str) -> list[str]:
        lineages: list[str] = []
        for match in _LINEAGE_RE.finditer(template):
            reference = match.group(1)
            if reference not in lineages:
                lineages.append(reference)
        return lineages

    def find_pseudo_patterns(self, template: str) -> list[str]:
        variants: list[str] = []
        for match in _PSEUDO_RE.finditer(template):
            if match.group("name") not in variants:
                variants.append(match.group("name"))
        return variants

    def pseudo_template(self, template: str, variant: str | None) -> str:
        def keep_selected(match: re.Match[str]) -> str:
            if variant is not None and match.group("name") == variant:
                return match.group("body")
            return ""

        return _PSEUDO_RE.sub(keep_selected, template)

    def __repr__(self) -> str:
        return f"Jinja2PatternEngine(extension={self._extension!r})"
