"""
Navigation taxonomy.

Groups visible patterns into the type / subtype hierarchy the front end
renders as navigation, and produces the lookup tables that travel with it.

Manifesto:
    The navigation tree, the link table and the path maps are byproducts of
    one pass over the pattern set. Building them together means the pattern
    list is scanned once and the three shapes can never disagree.

Architecture:
    ::

        visible patterns (sorted by dash path)
              │
              ▼
        for type in distinct(types):          first-seen order
            for subtype in distinct(subtypes):
                nav items + "View All"        {type}-{subtype}/index.html
            patterns without subtype          -> type.patternItems
            "View All" for the whole type     {type}/index.html
              │
              ├──► pattern_types   (PatternType / PatternSubType / NavItem)
              ├──► link            partial -> ../../patterns/{html_url}
              ├──► pattern_paths   type_name -> pattern_name -> path_dash
              └──► view_all_paths  type_name -> sub_type_name -> path

Guardrails:
    ❌ DON'T: Raise on duplicate display names
    ✅ DO: Keep the first occurrence in the path maps

Tags:
    navigation, taxonomy, pydantic, patternlab

Doc-Types:
    - API Reference
    - Architecture
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from patternlab.patterns.identifiers import strip_ordinals, to_display_case
from patternlab.patterns.models import Pattern
from patternlab.patterns.registry import FOLDER_NAME_PATTERNS

# The file name of the 'View all' and viewer pages
FILE_NAME_VIEWER = "index.html"

# The reserved keyword for the 'View all' page partial path
KEYWORD_PARTIAL_ALL = "all"

# The label of the 'View all' link in the navigation
KEYWORD_VIEW_ALL = "View All"

# The prefix of 'View all' page partials
VIEW_ALL_PARTIAL_PREFIX = "viewall"


class NavItem(BaseModel):
    """One navigation entry, serialized with the front end's field names."""

    model_config = ConfigDict(populate_by_name=True)

    pattern_path: str = Field(alias="patternPath")
    pattern_state: str | None = Field(default=None, alias="patternState")
    pattern_partial: str = Field(alias="patternPartial")
    pattern_name: str = Field(alias="patternName")


class PatternSubType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lc: str = Field(alias="patternSubtypeLC")
    uc: str = Field(alias="patternSubtypeUC")
    items: list[NavItem] = Field(default_factory=list, alias="patternSubtypeItems")


class PatternType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lc: str = Field(alias="patternTypeLC")
    uc: str = Field(alias="patternTypeUC")
    sub_types: list[PatternSubType] = Field(default_factory=list, alias="patternTypeItems")
    items: list[NavItem] = Field(default_factory=list, alias="patternItems")


@dataclass
class Taxonomy:
    pattern_types: list[PatternType] = field(default_factory=list)
    pattern_paths: dict[str, dict[str, str]] = field(default_factory=dict)
    view_all_paths: dict[str, dict[str, str]] = field(default_factory=dict)
    link: dict[str, str] = field(default_factory=dict)

    def nav_items(self) -> list[dict[str, Any]]:
        return [t.model_dump(by_alias=True) for t in self.pattern_types]

    def to_dict(self) -> dict[str, Any]:
        return {
            "patternTypes": self.nav_items(),
            "patternPaths": self.pattern_paths,
            "viewAllPaths": self.view_all_paths,
            "link": self.link,
        }


def pattern_link(pattern: Pattern) -> str:
    """Relative URL of a pattern page, as seen from another pattern page."""
    return f"../../{FOLDER_NAME_PATTERNS.lstrip('_')}/{pattern.html_url}"


def _nav_item(pattern: Pattern, state_of: Callable[[Pattern], str | None]) -> NavItem:
    return NavItem(
        pattern_path=pattern.html_url,
        pattern_state=state_of(pattern),
        pattern_partial=pattern.partial,
        pattern_name=pattern.display_name,
    )


def _distinct(values: Iterable[str]) -> list[str]:
    result: list[str] = []
    for value in values:
        if value and value not in result:
            result.append(value)
    return result


def build_taxonomy(
    patterns: Iterable[Pattern],
    state_of: Callable[[Pattern], str | None],
) -> Taxonomy:
    """Build navigation, link table and path maps from the visible patterns.

    Args:
        patterns: Session patterns in dash-path order; hidden ones are skipped
        state_of: Resolves the effective state shown for a pattern
    """
    visible = [p for p in patterns if not p.hidden]
    taxonomy = Taxonomy()

    for pattern_type in _distinct(p.type for p in visible):
        type_name = strip_ordinals(pattern_type)
        type_details = PatternType(lc=type_name, uc=to_display_case(type_name))

        typed_patterns = [p for p in visible if p.type == pattern_type]
        sub_types = _distinct(p.sub_type for p in typed_patterns)

        typed_pattern_paths: dict[str, str] = {}
        sub_type_paths: dict[str, str] = {}

        for sub_type in sub_types:
            sub_type_name = strip_ordinals(sub_type)
            sub_type_path = f"{pattern_type}-{sub_type}"
            sub_type_details = PatternSubType(lc=sub_type_name, uc=to_display_case(sub_type_name))

            for pattern in typed_patterns:
                if pattern.sub_type == sub_type:
                    sub_type_details.items.append(_nav_item(pattern, state_of))

            sub_type_details.items.append(
                NavItem(
                    pattern_path=f"{sub_type_path}/{FILE_NAME_VIEWER}",
                    pattern_partial=f"{VIEW_ALL_PARTIAL_PREFIX}-{type_name}-{sub_type_name}",
                    pattern_name=KEYWORD_VIEW_ALL,
                )
            )
            type_details.sub_types.append(sub_type_details)
            sub_type_paths.setdefault(sub_type_name, sub_type_path)

        for pattern in typed_patterns:
            taxonomy.link.setdefault(pattern.partial, pattern_link(pattern))
            typed_pattern_paths.setdefault(pattern.id.pattern_name, pattern.path_dash)

            if not sub_types:
                type_details.items.append(_nav_item(pattern, state_of))

        if sub_types:
            type_details.items.append(
                NavItem(
                    pattern_path=f"{pattern_type}/{FILE_NAME_VIEWER}",
                    pattern_partial=f"{VIEW_ALL_PARTIAL_PREFIX}-{type_name}-{KEYWORD_PARTIAL_ALL}",
                    pattern_name=KEYWORD_VIEW_ALL,
                )
            )

        taxonomy.pattern_paths.setdefault(type_name, typed_pattern_paths)
        if sub_type_paths:
            sub_type_paths.setdefault(KEYWORD_PARTIAL_ALL, pattern_type)
            taxonomy.view_all_paths.setdefault(type_name, sub_type_paths)

        taxonomy.pattern_types.append(type_details)

    return taxonomy
