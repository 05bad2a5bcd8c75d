"""
Pattern discovery.

Walks the meta and pattern directories of a source tree and builds the
ordered, partial-unique list of patterns for one compilation session.

Manifesto:
    Discovery is total and quiet. Missing directories are created, an
    unreadable file is logged and skipped, and the result is always a
    list sorted by dash path, independent of filesystem scan order.

Architecture:
    ::

        PatternRegistry.discover()
              │
              ├──► _meta/**/*{ext}            header / footer patterns
              ├──► _patterns/*/**/*{ext}      patterns (root-level files skipped)
              ├──► pseudo sections            one extra Pattern per variant
              ├──► _ensure_unique_partials()  subtype, dash path, then -2, -3.. on collision
              ├──► _resolve_lineages()        raw references -> partials
              └──► sorted by path_dash

Examples:
    >>> registry = PatternRegistry(Jinja2PatternEngine(), Path("source"))
    >>> patterns = registry.discover()
    >>> find_pattern(patterns, "atoms-button")
    Pattern('atoms-button', path='00-atoms-00-button')

Tags:
    discovery, registry, patterns, patternlab

Doc-Types:
    - API Reference
    - Architecture
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from patternlab.core.logging import get_logger
from patternlab.engines.base import PatternEngine
from patternlab.patterns.identifiers import IDENTIFIER_PSEUDO, strip_pattern_parameters
from patternlab.patterns.models import Pattern
from patternlab.storage import ensure_directory

logger = get_logger(__name__)

# The folder holding the shared pattern header and footer
FOLDER_NAME_META = "_meta"

# The folder holding pattern files
FOLDER_NAME_PATTERNS = "_patterns"


class PatternRegistry:
    """Builds the pattern list for one source directory and engine."""

    def __init__(
        self,
        engine: PatternEngine,
        source_path: Path,
        meta_folder: str = FOLDER_NAME_META,
        pattern_folder: str = FOLDER_NAME_PATTERNS,
    ):
        self.engine = engine
        self.source_path = Path(source_path)
        self.meta_path = self.source_path / meta_folder
        self.pattern_path = self.source_path / pattern_folder

    def discover(self) -> list[Pattern]:
        """Scan the source tree and return patterns sorted by dash path."""
        extension = self.engine.extension()

        ensure_directory(self.meta_path)
        patterns = self._load(self._scan(self.meta_path, extension), self.source_path)

        ensure_directory(self.pattern_path)
        views = [
            path
            for path in self._scan(self.pattern_path, extension)
            if path.parent != self.pattern_path
        ]
        patterns.extend(self._load(views, self.pattern_path))

        patterns.sort(key=lambda p: p.path_dash)
        self._ensure_unique_partials(patterns)
        self._resolve_lineages(patterns)

        logger.info(
            "patterns_discovered",
            source=str(self.source_path),
            engine=self.engine.name(),
            count=len(patterns),
        )
        return patterns

    @staticmethod
    def _scan(folder: Path, extension: str) -> list[Path]:
        return sorted(p for p in folder.rglob(f"*{extension}") if p.is_file())

    def _load(self, files: Iterable[Path], root: Path) -> list[Pattern]:
        patterns: list[Pattern] = []
        for file_path in files:
            try:
                source = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("pattern_file_skipped", file=str(file_path), error=str(e))
                continue

            pattern = Pattern.from_source(self.engine, file_path, root, source)
            patterns.append(pattern)

            for variant in pattern.pseudo_patterns:
                patterns.append(
                    Pattern.from_source(self.engine, file_path, root, source, pseudo=variant)
                )
        return patterns

    @staticmethod
    def _ensure_unique_partials(patterns: list[Pattern]) -> None:
        # Expects dash-path order so the first pattern keeps the short partial
        seen: set[str] = set()
        for pattern in patterns:
            if pattern.partial.lower() not in seen:
                seen.add(pattern.partial.lower())
                continue

            pid = pattern.id
            qualified = "-".join(
                s for s in (pid.type_name, pid.sub_type_name, pid.pattern_name) if s
            )
            if pid.pseudo:
                qualified = f"{qualified}{IDENTIFIER_PSEUDO}{pid.pseudo}"

            replacement = qualified if qualified.lower() not in seen else pattern.path_dash
            base, counter = replacement, 2
            while replacement.lower() in seen:
                replacement = f"{base}-{counter}"
                counter += 1
            logger.warning(
                "duplicate_partial",
                partial=pattern.partial,
                replacement=replacement,
                file=str(pattern.file_path),
            )
            pattern.partial = replacement
            seen.add(replacement.lower())

    @staticmethod
    def _resolve_lineages(patterns: list[Pattern]) -> None:
        for pattern in patterns:
            lineages: list[str] = []
            for reference in pattern.references:
                child = find_pattern(patterns, reference)
                partial = child.partial if child is not None else strip_pattern_parameters(reference)
                if partial and partial not in lineages:
                    lineages.append(partial)
            pattern.lineages = lineages


def find_pattern(patterns: Iterable[Pattern], search_term: str) -> Pattern | None:
    """Find a pattern by URL, path or partial, falling back to a partial prefix.

    Parameters and style modifiers are stripped from the term first. Matching
    is case-insensitive; ``None`` when nothing matches.
    """
    term = strip_pattern_parameters(search_term or "").lower()
    if not term:
        return None

    candidates = list(patterns)
    for pattern in candidates:
        if term in (
            pattern.view_url.lower(),
            pattern.html_url.lower(),
            pattern.path_slash.lower(),
            pattern.path_dash.lower(),
            pattern.partial.lower(),
        ):
            return pattern

    for pattern in candidates:
        if pattern.partial.lower().startswith(term):
            return pattern

    return None
