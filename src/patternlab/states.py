"""
Lifecycle state resolution.

Answers "what is the most urgent state visible from this pattern, including
everything it transitively includes?" The priority order comes from the
``patternStates`` setting: earlier entries win.

Manifesto:
    A page is only as finished as its least finished part. State therefore
    propagates upward through the include graph, except for the last
    (lowest-priority) configured state, which only ever describes the pattern
    that declares it.

Architecture:
    ::

        resolve(page)                       states = [inprogress, inreview, complete]
          candidate = page.state
          └── walk lineage depth-first
                child.state adopted when
                  - it is a configured state
                  - it is not the last configured state
                  - it outranks the candidate (or there is none)
                visited partials are skipped (cycle guard)

Examples:
    >>> resolver = StateResolver(["complete", "inreview", "inprogress"], lookup)
    >>> resolver.resolve(page)   # children in "inprogress" and "complete"
    'complete'

Tags:
    state, lifecycle, graph, patternlab

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from patternlab.patterns.identifiers import split_setting
from patternlab.patterns.models import Pattern


class StateResolver:
    """Propagates lifecycle state through pattern lineage."""

    def __init__(self, states: Sequence[str], lookup: Callable[[str], Pattern | None]):
        self.states = list(states)
        self._lookup = lookup

    @classmethod
    def from_setting(cls, value: str, lookup: Callable[[str], Pattern | None]) -> StateResolver:
        return cls(split_setting(value), lookup)

    def resolve(self, pattern: Pattern) -> str | None:
        state = self._walk(pattern, pattern.state or None, visited=set())
        return state or None

    def _walk(self, pattern: Pattern, candidate: str | None, visited: set[str]) -> str | None:
        visited.add(pattern.partial.lower())

        for partial in pattern.lineages:
            child = self._lookup(partial)
            if child is None or child.partial.lower() in visited:
                continue
            candidate = self._adopt(candidate, child.state)
            candidate = self._walk(child, candidate, visited)

        return candidate

    def _adopt(self, current: str | None, found: str) -> str | None:
        if not found or found not in self.states:
            return current

        found_index = self.states.index(found)
        if found_index == len(self.states) - 1:
            return current

        if not current or current not in self.states:
            return found
        if found_index < self.states.index(current):
            return found
        return current
