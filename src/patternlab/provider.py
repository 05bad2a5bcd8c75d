"""
Pattern provider: one compilation session.

Holds every computed artifact of a session (config, patterns, data,
taxonomy, ignored lists, engine, cache buster), computes each lazily on first
access, and forgets all of them together on :meth:`PatternProvider.clear`.

Manifesto:
    Compilation is a pure function of the filesystem snapshot and the
    configuration. The provider makes that function cheap to call
    repeatedly: nothing is recomputed until the caller says the snapshot
    changed, and then everything is.

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     PatternProvider                          │
        │  engines (injected) ──► pattern_engine()                    │
        ├─────────────────────────────────────────────────────────────┤
        │  config()               ConfigStore.load()                  │
        │  patterns()             PatternRegistry.discover()          │
        │  ignored_directories()  setting("id") + _meta + public      │
        │  ignored_extensions()   setting("ie") + ""                  │
        │  cache_buster()         unix time | "0"                     │
        │  taxonomy()             build_taxonomy(patterns, get_state) │
        │  data()                 get_data(_data/**) ⊕ session meta   │
        ├─────────────────────────────────────────────────────────────┤
        │  clear()  ──► every cached field back to None               │
        └─────────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: Share one provider between threads without a lock
    ✅ DO: Create a provider per session, or synchronize externally

    ❌ DON'T: Invalidate single fields
    ✅ DO: Call clear() when the source tree changes

Examples:
    >>> provider = PatternProvider(Path("."))
    >>> [p.partial for p in provider.patterns()][:2]
    ['atoms-colors', 'atoms-button']
    >>> provider.get_state(provider.get_pattern("pages-homepage"))
    'inprogress'

Tags:
    session, cache, provider, patternlab

Doc-Types:
    - API Reference
    - Architecture
"""

from __future__ import annotations

import json
import socket
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from patternlab import __version__
from patternlab.config import ConfigStore
from patternlab.core.errors import EngineError, PatternNotFoundError, RenderError
from patternlab.core.logging import get_logger
from patternlab.data import DataCollection, expand_list_items, get_data, merge_data
from patternlab.engines import PatternEngine, default_engines, select_engine
from patternlab.media_queries import get_media_queries
from patternlab.patterns.identifiers import split_setting, to_display_case
from patternlab.patterns.models import DATA_EXTENSIONS, Pattern
from patternlab.patterns.registry import FOLDER_NAME_META, PatternRegistry, find_pattern
from patternlab.states import StateResolver
from patternlab.storage import ensure_directory
from patternlab.taxonomy import Taxonomy, build_taxonomy

logger = get_logger(__name__)

# The name of the folder containing annotations
FOLDER_NAME_ANNOTATIONS = "_annotations"

# The name of the folder containing data files
FOLDER_NAME_DATA = "_data"

# The default name of the folder containing the static export
FOLDER_NAME_PUBLIC = "public"

# The name of the folder containing snapshots
FOLDER_NAME_SNAPSHOTS = "snapshots"

# The setting naming the active pattern engine
KEYWORD_PATTERN_ENGINE = "patternEngine"


class PatternProvider:
    """Lazily computed, explicitly cleared state of one compilation session."""

    def __init__(
        self,
        project_root: Path,
        engines: Sequence[PatternEngine] | None = None,
        *,
        no_cache: bool = False,
    ):
        self.project_root = Path(project_root)
        self.engines: list[PatternEngine] = (
            list(engines) if engines is not None else default_engines()
        )
        if not self.engines:
            raise EngineError("A pattern provider needs at least one template engine")
        self.no_cache = no_cache

        self._cache_buster: str | None = None
        self._config: dict[str, str] | None = None
        self._data: DataCollection | None = None
        self._ignored_directories: list[str] | None = None
        self._ignored_extensions: list[str] | None = None
        self._pattern_engine: PatternEngine | None = None
        self._patterns: list[Pattern] | None = None
        self._pattern_index: dict[str, Pattern] | None = None
        self._taxonomy: Taxonomy | None = None

    def clear(self) -> None:
        """Forget every cached value; the next access recomputes it."""
        self._cache_buster = None
        self._config = None
        self._data = None
        self._ignored_directories = None
        self._ignored_extensions = None
        self._pattern_engine = None
        self._patterns = None
        self._pattern_index = None
        self._taxonomy = None
        logger.debug("provider_cleared", project_root=str(self.project_root))

    # -- configuration ------------------------------------------------------

    def config(self) -> dict[str, str]:
        if self._config is not None:
            return self._config

        default_engine = self.engines[-1].name().lower()
        self._config = ConfigStore(self.project_root, __version__, default_engine).load()
        return self._config

    def setting(self, name: str) -> str:
        """A config value with quotes removed; ``""`` when not set."""
        return self.config().get(name, "").replace('"', "")

    @property
    def source_path(self) -> Path:
        directory = self.setting("sourceDir")
        return self.project_root / directory if directory else self.project_root

    @property
    def public_path(self) -> Path:
        return self.project_root / (self.setting("publicDir") or FOLDER_NAME_PUBLIC)

    def states(self) -> list[str]:
        return split_setting(self.setting("patternStates"))

    def ignored_directories(self) -> list[str]:
        if self._ignored_directories is not None:
            return self._ignored_directories

        ignored = split_setting(self.setting("id"))
        ignored.append(FOLDER_NAME_META)
        ignored.append(self.setting("publicDir") or FOLDER_NAME_PUBLIC)
        self._ignored_directories = ignored
        return self._ignored_directories

    def ignored_extensions(self) -> list[str]:
        if self._ignored_extensions is not None:
            return self._ignored_extensions

        ignored = split_setting(self.setting("ie"))
        # Extensionless files (README, LICENSE) are never exported
        ignored.append("")
        self._ignored_extensions = ignored
        return self._ignored_extensions

    def pattern_engine(self) -> PatternEngine:
        if self._pattern_engine is not None:
            return self._pattern_engine

        self._pattern_engine = select_engine(self.engines, self.setting(KEYWORD_PATTERN_ENGINE))
        return self._pattern_engine

    def cache_buster(self, no_cache: bool | None = None) -> str:
        """Unix timestamp captured once per session, or ``"0"`` when disabled."""
        if self._cache_buster is not None:
            return self._cache_buster

        enabled = self.setting("cacheBusterOn").strip().lower() == "true"
        if no_cache or self.no_cache:
            enabled = False

        self._cache_buster = str(int(time.time())) if enabled else "0"
        return self._cache_buster

    # -- patterns -----------------------------------------------------------

    def patterns(self) -> list[Pattern]:
        if self._patterns is not None:
            return self._patterns

        registry = PatternRegistry(self.pattern_engine(), self.source_path)
        self._patterns = registry.discover()
        self._pattern_index = {p.partial.lower(): p for p in self._patterns}
        return self._patterns

    def find_pattern(self, search_term: str) -> Pattern | None:
        return find_pattern(self.patterns(), search_term)

    def get_pattern(self, search_term: str) -> Pattern:
        """Like :meth:`find_pattern`, but raises when nothing matches."""
        pattern = self.find_pattern(search_term)
        if pattern is None:
            raise PatternNotFoundError(search_term)
        return pattern

    def _pattern_by_partial(self, partial: str) -> Pattern | None:
        self.patterns()
        return self._pattern_index.get(partial.lower()) if self._pattern_index else None

    def get_state(self, pattern: Pattern) -> str | None:
        resolver = StateResolver(self.states(), self._pattern_by_partial)
        return resolver.resolve(pattern)

    def taxonomy(self) -> Taxonomy:
        if self._taxonomy is not None:
            return self._taxonomy

        self._taxonomy = build_taxonomy(self.patterns(), self.get_state)
        return self._taxonomy

    def media_queries(self) -> list[str]:
        return get_media_queries(self.source_path, self.ignored_directories())

    # -- data ---------------------------------------------------------------

    def data_files(self) -> list[Path]:
        data_path = ensure_directory(self.source_path / FOLDER_NAME_DATA)
        files: list[Path] = []
        for extension in DATA_EXTENSIONS:
            files.extend(sorted(p for p in data_path.rglob(f"*{extension}") if p.is_file()))
        return files

    def data(self) -> DataCollection:
        """Global data files merged with the session metadata the viewer needs."""
        if self._data is not None:
            return self._data

        taxonomy = self.taxonomy()
        ensure_directory(self.source_path / FOLDER_NAME_ANNOTATIONS)

        metadata: dict[str, Any] = {
            "patternEngineName": to_display_case(self.pattern_engine().name()),
            "ishminimum": self.setting("ishMinimum"),
            "ishmaximum": self.setting("ishMaximum"),
            "qrcodegeneratoron": self.setting("qrCodeGeneratorOn"),
            "ipaddress": _local_ip_address(),
            "xiphostname": self.setting("xipHostname"),
            "autoreloadnav": self.setting("autoReloadNav"),
            "autoreloadport": self.setting("autoReloadPort"),
            "pagefollownav": self.setting("pageFollowNav"),
            "pagefollowport": self.setting("pageFollowPort"),
            "ishControlsHide": self.hidden_ish_controls(),
            "cacheBuster": self.cache_buster(),
            "link": taxonomy.link,
            "patternpaths": json.dumps(taxonomy.pattern_paths),
            "viewallpaths": json.dumps(taxonomy.view_all_paths),
            "mqs": self.media_queries(),
            "patternTypes": taxonomy.nav_items(),
        }

        data_files = self.data_files()
        file_data = expand_list_items(get_data(data_files))
        self._data = merge_data(file_data, metadata)
        logger.info(
            "data_collected",
            files=len(data_files),
            keys=len(self._data),
        )
        return self._data

    def hidden_ish_controls(self) -> dict[str, bool]:
        hidden = {name: True for name in split_setting(self.setting("ishControlsHide"))}

        # Live reload and page follow need a running server, which the
        # compiler never provides
        hidden["tools-follow"] = True
        hidden["tools-reload"] = True

        if not (self.source_path / FOLDER_NAME_SNAPSHOTS).is_dir():
            hidden["tools-snapshot"] = True
        return hidden

    def pattern_data(self, pattern: Pattern) -> DataCollection:
        """Session data with the pattern's own data files layered on top."""
        data = self.data()
        pattern_files = [p for p in pattern.data_files if p.is_file()]
        if pattern_files:
            data = merge_data(data, get_data(pattern_files))
        return merge_data(
            data,
            {
                "patternPartial": pattern.partial,
                "patternState": self.get_state(pattern),
                "patternName": pattern.display_name,
            },
        )

    # -- rendering ----------------------------------------------------------

    def partial_source(self, name: str) -> str | None:
        """Template source for an include reference, or ``None``."""
        pattern = self.find_pattern(name)
        return pattern.template if pattern is not None else None

    def render_pattern(self, pattern: Pattern, context: DataCollection | None = None) -> str:
        """Render a pattern with its data (or an explicit context).

        Raises:
            RenderError: the engine failed on this pattern or one it includes
        """
        context = context if context is not None else self.pattern_data(pattern)
        try:
            return self.pattern_engine().render(
                pattern.template,
                context.to_native(),
                partials=self.partial_source,
            )
        except RenderError as e:
            if e.context.pattern is None:
                e.with_context(pattern=pattern.partial)
            raise


def _local_ip_address() -> str:
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError:
        return "127.0.0.1"
