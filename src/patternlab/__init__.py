"""
patternlab: compiles a tree of UI template fragments into a browsable
pattern library.

Examples:
    >>> from patternlab import PatternProvider, StaticBuilder
    >>> provider = PatternProvider(Path("."))
    >>> StaticBuilder(provider).build().patterns_rendered
    12
"""

__version__ = "0.1.0"

from patternlab.provider import PatternProvider  # noqa: E402
from patternlab.builder import BuildResult, StaticBuilder  # noqa: E402

__all__ = ["__version__", "PatternProvider", "StaticBuilder", "BuildResult"]
