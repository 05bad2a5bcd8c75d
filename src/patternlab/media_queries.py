"""Responsive breakpoint extraction from stylesheets."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from patternlab.core.logging import get_logger

logger = get_logger(__name__)

_MEDIA_QUERY_RE = re.compile(r"(min|max)-width:([ ]+)?(([0-9]{1,5})(\.[0-9]{1,20}|)(px|em))")
_LEADING_NUMBER_RE = re.compile(r"^[0-9]+(?:\.[0-9]+)?")


def _relative_directory(file_path: Path, root: Path) -> str:
    parent = file_path.parent.relative_to(root).as_posix()
    return "" if parent == "." else parent


def _magnitude(value: str) -> float:
    match = _LEADING_NUMBER_RE.match(value)
    return float(match.group(0)) if match else 0.0


def extract_media_queries(css: str) -> list[str]:
    """All ``min-width``/``max-width`` px or em values in a stylesheet, in order."""
    return [match.group(3) for match in _MEDIA_QUERY_RE.finditer(css)]


def get_media_queries(root: Path, ignored_directories: Iterable[str]) -> list[str]:
    """Distinct breakpoints of every stylesheet under ``root``, sorted numerically.

    A stylesheet is skipped when its directory, relative to ``root``, starts
    with any ignored entry. This is a plain string prefix test: ``css`` also
    excludes ``css-legacy/``.
    """
    root = Path(root)
    ignored = [d for d in ignored_directories if d]
    media_queries: list[str] = []

    for file_path in sorted(root.rglob("*.css")):
        if not file_path.is_file():
            continue
        directory = _relative_directory(file_path, root)
        if any(directory.startswith(prefix) for prefix in ignored):
            continue

        try:
            css = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("stylesheet_skipped", file=str(file_path), error=str(e))
            continue

        for media_query in extract_media_queries(css):
            if media_query not in media_queries:
                media_queries.append(media_query)

    return sorted(media_queries, key=_magnitude)
