"""Template engines available to the pattern compiler."""

from patternlab.engines.base import PartialSource, PatternEngine, select_engine
from patternlab.engines.jinja import Jinja2PatternEngine


def default_engines() -> list[PatternEngine]:
    """Built-in engines, in registration order."""
    return [Jinja2PatternEngine()]


__all__ = [
    "PartialSource",
    "PatternEngine",
    "Jinja2PatternEngine",
    "default_engines",
    "select_engine",
]
