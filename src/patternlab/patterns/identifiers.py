"""
Pattern identifier parsing.

Decodes the compact naming convention used for pattern files and include
references into a structured, immutable :class:`PatternId`.

Manifesto:
    A pattern's file path *is* its metadata. Ordinals give sort order,
    folders give type and subtype, markers give state, visibility and
    variants. Parsing never fails: a malformed name yields empty fields.

Architecture:
    ::

        _00-atoms/01-global/00-colors@inprogress~dark:mod(x: 1)
        │ │       │         │         │          │    │   │
        │ │       │         │         │          │    │   └─ call params (stripped)
        │ │       │         │         │          │    └───── style modifier (stripped)
        │ │       │         │         │          └────────── pseudo variant
        │ │       │         │         └───────────────────── state tag
        │ │       │         └─────────────────────────────── name (with ordinal)
        │ │       └───────────────────────────────────────── subtype (with ordinal)
        │ └───────────────────────────────────────────────── type (with ordinal)
        └─────────────────────────────────────────────────── hidden marker

Examples:
    >>> pid = parse_identifier("00-atoms/01-global/00-colors@inprogress")
    >>> pid.partial
    'atoms-colors'
    >>> pid.path_dash
    '00-atoms-01-global-00-colors'
    >>> pid.state
    'inprogress'
    >>> to_display_case("inline-form")
    'Inline Form'

Tags:
    parser, naming-convention, identifiers, patternlab

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

# Denotes a delimited list in settings
IDENTIFIER_DELIMITER = ","

# Denotes a hidden object
IDENTIFIER_HIDDEN = "_"

# Denotes a style modifier in an include reference
IDENTIFIER_MODIFIER = ":"

# Separates several style modifier values
IDENTIFIER_MODIFIER_SEPARATOR = "|"

# Denotes pattern call parameters in an include reference
IDENTIFIER_PARAMETERS = "("

# Denotes a pseudo pattern
IDENTIFIER_PSEUDO = "~"

# Denotes a space character in display name parsing
IDENTIFIER_SPACE = "-"

# Denotes a pattern has a state
IDENTIFIER_STATE = "@"

_ORDINAL_RE = re.compile(r"^\d+-")


def strip_ordinals(segment: str) -> str:
    """Remove the hidden marker and a leading ``00-`` ordinal from one segment."""
    return _ORDINAL_RE.sub("", segment.lstrip(IDENTIFIER_HIDDEN))


def to_display_case(value: str) -> str:
    """Convert ``inline-form`` style names to ``Inline Form``."""
    words = value.replace(IDENTIFIER_SPACE, " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def strip_pattern_parameters(value: str) -> str:
    """Remove pattern call parameters and style modifiers from a reference."""
    index = value.find(IDENTIFIER_PARAMETERS)
    if index > -1:
        value = value[:index]

    index = value.find(IDENTIFIER_MODIFIER)
    if index > -1:
        value = value[:index]

    return value.strip()


def split_setting(value: str | None) -> list[str]:
    """Split a comma-delimited setting, dropping empty entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(IDENTIFIER_DELIMITER) if item.strip()]


@dataclass(frozen=True)
class PatternId:
    """Structured identity of a pattern.

    Raw segments keep their ordinals and hidden markers so that dash paths
    sort in ordinal order; the ``*_name`` properties give the cleaned values.
    """

    raw: str = ""
    type: str = ""
    sub_type: str = ""
    name: str = ""
    state: str = ""
    hidden: bool = False
    pseudo: str = ""

    @property
    def type_name(self) -> str:
        return strip_ordinals(self.type)

    @property
    def sub_type_name(self) -> str:
        return strip_ordinals(self.sub_type)

    @property
    def pattern_name(self) -> str:
        return strip_ordinals(self.name)

    @property
    def display_name(self) -> str:
        display = to_display_case(self.pattern_name)
        if self.pseudo:
            display = f"{display} {to_display_case(self.pseudo)}".strip()
        return display

    @property
    def partial(self) -> str:
        """Canonical ``type-name`` key, with ``~variant`` for pseudo patterns."""
        partial = "-".join(s for s in (self.type_name, self.pattern_name) if s)
        return self._with_pseudo(partial)

    @property
    def path_slash(self) -> str:
        return self._with_pseudo("/".join(s for s in self._segments() if s))

    @property
    def path_dash(self) -> str:
        return self._with_pseudo("-".join(s for s in self._segments() if s))

    @property
    def html_url(self) -> str:
        return f"{self.path_dash}/{self.path_dash}.html"

    @property
    def view_url(self) -> str:
        return f"patterns/{self.html_url}"

    def with_pseudo(self, variant: str) -> PatternId:
        """Return the identity of one pseudo-pattern variant of this pattern."""
        return replace(self, pseudo=variant, raw=f"{self.raw}{IDENTIFIER_PSEUDO}{variant}")

    def _segments(self) -> tuple[str, str, str]:
        return (self.type, self.sub_type, self.name)

    def _with_pseudo(self, value: str) -> str:
        if self.pseudo:
            return f"{value}{IDENTIFIER_PSEUDO}{self.pseudo}"
        return value


def parse_identifier(value: str | None) -> PatternId:
    """Parse a relative file path (without extension) or a partial string.

    Path form splits on ``/``: one segment is read as a partial
    (``type-name``), two as ``type/name``, three or more as
    ``type/subtype.../name`` with middle segments joined by ``-``.
    """
    raw = value or ""
    text = strip_pattern_parameters(raw.replace("\\", "/")).strip("/")

    text, _, pseudo = text.partition(IDENTIFIER_PSEUDO)
    segments = [s for s in text.split("/") if s]
    if not segments:
        return PatternId(raw=raw, pseudo=pseudo.strip())

    name, _, state = segments[-1].partition(IDENTIFIER_STATE)
    if len(segments) == 1:
        type_, _, name = _split_partial(name)
        sub_type = ""
    else:
        type_ = segments[0]
        sub_type = "-".join(segments[1:-1])

    hidden = any(s.startswith(IDENTIFIER_HIDDEN) for s in (type_, sub_type, name))

    return PatternId(
        raw=raw,
        type=type_,
        sub_type=sub_type,
        name=name,
        state=state.strip(),
        hidden=hidden,
        pseudo=pseudo.strip(),
    )


def _split_partial(value: str) -> tuple[str, str, str]:
    # Ordinals survive in partial-style input ("00-atoms-00-button"), so the
    # type is everything up to the first dash that follows a non-ordinal part.
    match = re.match(r"^(_?(?:\d+-)?[^-]+)-(.+)$", value)
    if match is None:
        return ("", "", value)
    return (match.group(1), "-", match.group(2))
