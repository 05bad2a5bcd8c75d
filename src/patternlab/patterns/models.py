"""
Pattern entity.

A :class:`Pattern` is one template fragment plus its parsed identity and the
metadata the compiler derives from its body: which other patterns it
includes (its lineage) and which pseudo-pattern variants it declares.

Tags:
    pattern, entity, model, patternlab

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from patternlab.engines.base import PatternEngine
from patternlab.patterns.identifiers import IDENTIFIER_PSEUDO, PatternId, parse_identifier

# Structured data formats, in the order data files are layered
DATA_EXTENSIONS = (".json", ".yaml", ".yml")


@dataclass
class Pattern:
    """One pattern (or pseudo-pattern variant) in a compilation session.

    ``partial`` starts as the identity's canonical partial; the registry may
    rewrite it to keep partials unique across the session.
    """

    id: PatternId
    file_path: Path
    template: str = ""
    references: list[str] = field(default_factory=list)
    lineages: list[str] = field(default_factory=list)
    pseudo_patterns: list[str] = field(default_factory=list)
    partial: str = ""

    def __post_init__(self) -> None:
        if not self.partial:
            self.partial = self.id.partial

    @classmethod
    def from_source(
        cls,
        engine: PatternEngine,
        file_path: Path,
        root: Path,
        source: str,
        pseudo: str | None = None,
    ) -> Pattern:
        """Build a pattern from a template file's source text.

        ``root`` is the directory the identifier is parsed relative to.
        With ``pseudo`` set, the result is that variant of the file.
        """
        relative = file_path.relative_to(root).as_posix()
        extension = engine.extension()
        if extension and relative.endswith(extension):
            relative = relative[: -len(extension)]

        pattern_id = parse_identifier(relative)
        if pseudo:
            pattern_id = pattern_id.with_pseudo(pseudo)

        template = engine.pseudo_template(source, pseudo)
        return cls(
            id=pattern_id,
            file_path=file_path,
            template=template,
            references=engine.find_lineages(template),
            pseudo_patterns=[] if pseudo else engine.find_pseudo_patterns(source),
        )

    # -- identity shortcuts -------------------------------------------------

    @property
    def type(self) -> str:
        return self.id.type

    @property
    def sub_type(self) -> str:
        return self.id.sub_type

    @property
    def name(self) -> str:
        return self.id.name

    @property
    def state(self) -> str:
        return self.id.state

    @property
    def hidden(self) -> bool:
        return self.id.hidden

    @property
    def pseudo(self) -> str:
        return self.id.pseudo

    @property
    def display_name(self) -> str:
        return self.id.display_name

    @property
    def path_dash(self) -> str:
        return self.id.path_dash

    @property
    def path_slash(self) -> str:
        return self.id.path_slash

    @property
    def html_url(self) -> str:
        return self.id.html_url

    @property
    def view_url(self) -> str:
        return self.id.view_url

    @property
    def data_files(self) -> list[Path]:
        """Candidate pattern-specific data files, base first, variant last."""
        stem = self.file_path.name.split(".", 1)[0]
        names = [f"{stem}{ext}" for ext in DATA_EXTENSIONS]
        if self.pseudo:
            names += [f"{stem}{IDENTIFIER_PSEUDO}{self.pseudo}{ext}" for ext in DATA_EXTENSIONS]
        return [self.file_path.with_name(name) for name in names]

    def __repr__(self) -> str:
        return f"Pattern({self.partial!r}, path={self.path_dash!r})"
