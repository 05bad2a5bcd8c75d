"""
Template engine protocol and selection.

Manifesto:
    The compiler never renders templates itself. It talks to a template
    engine through a small capability set, and the engine in use is chosen
    from an explicitly supplied list by the ``patternEngine`` setting. No
    process-wide lookup, no import-time registration.

Architecture:
    ::

        PatternProvider(engines=[Jinja2PatternEngine(), CustomEngine()])
                │
                ▼
        select_engine(engines, setting("patternEngine"))
                │
                ├── name matches (case-insensitive) ──► that engine
                └── no match ──────────────────────────► last engine in list

Tags:
    template-engine, protocol, dependency-injection, patternlab

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from patternlab.core.errors import EngineError

# Resolves an include reference to template source, or None when unknown
PartialSource = Callable[[str], str | None]


@runtime_checkable
class PatternEngine(Protocol):
    """Capabilities the compiler needs from a template engine."""

    def name(self) -> str:
        """Engine name as used by the ``patternEngine`` setting."""
        ...

    def extension(self) -> str:
        """Template file extension including the dot, e.g. ``.jinja``."""
        ...

    def render(
        self,
        template: str,
        context: Mapping[str, Any],
        partials: PartialSource | None = None,
    ) -> str:
        """Render template source with a context."""
        ...

    def find_lineages(self, template: str) -> list[str]:
        """Raw references to other patterns included by the template."""
        ...

    def find_pseudo_patterns(self, template: str) -> list[str]:
        """Names of the pseudo-pattern sections declared in the template."""
        ...

    def pseudo_template(self, template: str, variant: str | None) -> str:
        """Template source for one variant; ``None`` gives the base pattern."""
        ...


def select_engine(engines: Sequence[PatternEngine], name: str | None) -> PatternEngine:
    """Pick the engine whose name matches, defaulting to the last registered."""
    available = [engine for engine in engines if engine is not None]
    if not available:
        raise EngineError("No template engines registered")

    wanted = (name or "").strip().lower()
    for engine in available:
        if engine.name().lower() == wanted:
            return engine
    return available[-1]
