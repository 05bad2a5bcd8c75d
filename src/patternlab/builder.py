"""
Static exporter.

Renders every pattern of a session into the public directory, together
with the front-end data file and a plain copy of the source assets.

Manifesto:
    One command produces the whole browsable artifact. The exporter owns no
    state of its own: everything it writes comes from one
    :class:`PatternProvider` session, so a build is as deterministic as the
    session it reads.

Architecture:
    ::

        StaticBuilder.build()
              │
              ├──► for each pattern (meta patterns skipped)
              │         render(meta-head) + render(pattern) + render(meta-foot)
              │         ├──► patterns/{path_dash}/{path_dash}.html
              │         ├──► patterns/{path_dash}/{path_dash}.escaped.html
              │         └──► patterns/{path_dash}/{path_dash}{extension}
              │
              ├──► "View All" pages           patterns/{type}-{subtype}/index.html
              │                               patterns/{type}/index.html
              ├──► styleguide/data/patternlab-data.js
              ├──► assets                     source/** minus _*, ignored dirs / exts
              │
              └──► BuildResult

Features:
    - Header and footer wrapping from the ``_meta`` patterns
    - Escaped markup copy for the viewer's code panel
    - One failing pattern does not stop the build

Guardrails:
    ❌ DON'T: Abort the export on the first RenderError
    ✅ DO: Record the failure in BuildResult and keep going

    ❌ DON'T: Write outside the public directory
    ✅ DO: Go through OutputStorage, which rejects escaping paths

Tags:
    exporter, static-site, build, patternlab

Doc-Types:
    - API Reference
    - Architecture
"""

from __future__ import annotations

import html
import json
from dataclasses import dataclass, field
from pathlib import Path

from patternlab.core.errors import RenderError
from patternlab.core.logging import LogContext, get_logger
from patternlab.patterns.models import Pattern
from patternlab.patterns.registry import FOLDER_NAME_META, FOLDER_NAME_PATTERNS
from patternlab.provider import PatternProvider
from patternlab.storage import OutputStorage
from patternlab.taxonomy import FILE_NAME_VIEWER

logger = get_logger(__name__)

# The partials of the shared header and footer
PARTIAL_META_HEAD = "meta-head"
PARTIAL_META_FOOT = "meta-foot"

# The front-end data file, relative to the public directory
FILE_PATH_DATA = "styleguide/data/patternlab-data.js"

OUTPUT_FOLDER_PATTERNS = FOLDER_NAME_PATTERNS.lstrip("_")


@dataclass
class BuildResult:
    """Summary of one export."""

    output_dir: Path
    patterns_rendered: int = 0
    view_all_pages: int = 0
    assets_copied: int = 0
    bytes_written: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class StaticBuilder:
    """Writes the compiled pattern library of a session to its public directory."""

    def __init__(self, provider: PatternProvider, output_dir: Path | None = None):
        self.provider = provider
        self.output_dir = Path(output_dir) if output_dir else provider.public_path

    def build(self) -> BuildResult:
        with LogContext(build_output=str(self.output_dir)):
            return self._build()

    def _build(self) -> BuildResult:
        storage = OutputStorage(self.output_dir)
        result = BuildResult(output_dir=storage.base_path)

        rendered: dict[str, str] = {}
        for pattern in self.provider.patterns():
            if self._is_meta(pattern):
                continue
            body = self._render(pattern, result)
            if body is None:
                continue
            rendered[pattern.partial] = body
            self._write_pattern(storage, pattern, body, result)

        self._write_view_all_pages(storage, rendered, result)
        self._write(storage, FILE_PATH_DATA, self.front_end_data(), result)
        self._copy_assets(storage, result)

        logger.info(
            "build_complete",
            output=str(storage.base_path),
            patterns=result.patterns_rendered,
            view_all=result.view_all_pages,
            assets=result.assets_copied,
            errors=len(result.errors),
        )
        return result

    # -- patterns -----------------------------------------------------------

    @staticmethod
    def _is_meta(pattern: Pattern) -> bool:
        return pattern.type == FOLDER_NAME_META

    def _render(self, pattern: Pattern, result: BuildResult) -> str | None:
        try:
            with LogContext(pattern=pattern.partial):
                return self.provider.render_pattern(pattern)
        except RenderError as e:
            logger.error("pattern_render_failed", pattern=pattern.partial, error=e.message)
            result.errors.append(f"{pattern.partial}: {e.message}")
            return None

    def _wrap(self, pattern: Pattern | None, body: str) -> str:
        head = self._render_meta(PARTIAL_META_HEAD, pattern)
        foot = self._render_meta(PARTIAL_META_FOOT, pattern)
        return f"{head}{body}{foot}"

    def _render_meta(self, partial: str, pattern: Pattern | None) -> str:
        meta = self.provider.find_pattern(partial)
        if meta is None or not self._is_meta(meta):
            return ""
        context = self.provider.pattern_data(pattern) if pattern else self.provider.data()
        return self.provider.render_pattern(meta, context)

    def _write_pattern(
        self, storage: OutputStorage, pattern: Pattern, body: str, result: BuildResult
    ) -> None:
        folder = f"{OUTPUT_FOLDER_PATTERNS}/{pattern.path_dash}"
        extension = self.provider.pattern_engine().extension()

        try:
            page = self._wrap(pattern, body)
        except RenderError as e:
            result.errors.append(f"{pattern.partial}: {e.message}")
            return

        self._write(storage, f"{folder}/{pattern.path_dash}.html", page, result)
        self._write(storage, f"{folder}/{pattern.path_dash}.escaped.html", html.escape(body), result)
        self._write(storage, f"{folder}/{pattern.path_dash}{extension}", pattern.template, result)
        result.patterns_rendered += 1

    def _write_view_all_pages(
        self, storage: OutputStorage, rendered: dict[str, str], result: BuildResult
    ) -> None:
        pages: dict[str, list[str]] = {}
        for pattern in self.provider.patterns():
            # Only subtyped patterns have "View All" pages in the navigation
            if pattern.hidden or not pattern.sub_type or pattern.partial not in rendered:
                continue
            body = rendered[pattern.partial]
            pages.setdefault(pattern.type, []).append(body)
            pages.setdefault(f"{pattern.type}-{pattern.sub_type}", []).append(body)

        for folder, bodies in pages.items():
            try:
                page = self._wrap(None, "\n".join(bodies))
            except RenderError as e:
                result.errors.append(f"{folder}: {e.message}")
                continue
            self._write(storage, f"{OUTPUT_FOLDER_PATTERNS}/{folder}/{FILE_NAME_VIEWER}", page, result)
            result.view_all_pages += 1

    # -- front-end data -----------------------------------------------------

    def front_end_data(self) -> str:
        """The viewer's data file: config, controls, navigation and path maps."""
        provider = self.provider
        data = provider.data()
        taxonomy = provider.taxonomy()

        config = {
            "cacheBuster": provider.cache_buster(),
            "ishMinimum": provider.setting("ishMinimum"),
            "ishMaximum": provider.setting("ishMaximum"),
            "patternEngine": provider.pattern_engine().name(),
            "patternStates": provider.states(),
            "mqs": data["mqs"].to_native(),
        }
        ish_controls = {"ishControlsHide": data["ishControlsHide"].to_native()}
        nav_items = {"patternTypes": taxonomy.nav_items()}

        lines = [
            f"var config = {json.dumps(config)};",
            f"var ishControls = {json.dumps(ish_controls)};",
            f"var navItems = {json.dumps(nav_items)};",
            f"var patternPaths = {json.dumps(taxonomy.pattern_paths)};",
            f"var viewAllPaths = {json.dumps(taxonomy.view_all_paths)};",
            "var plugins = [];",
        ]
        return "\n".join(lines) + "\n"

    # -- assets -------------------------------------------------------------

    def _copy_assets(self, storage: OutputStorage, result: BuildResult) -> None:
        source_path = self.provider.source_path
        if not source_path.is_dir():
            return

        for file_path in sorted(source_path.rglob("*")):
            if not file_path.is_file():
                continue
            relative = file_path.relative_to(source_path)
            if not self.is_exported_asset(relative):
                continue
            try:
                info = storage.copy(file_path, relative.as_posix())
            except OSError as e:
                logger.warning("asset_copy_failed", file=str(file_path), error=str(e))
                result.errors.append(f"{relative.as_posix()}: {e}")
                continue
            result.assets_copied += 1
            result.bytes_written += info.size_bytes

    def is_exported_asset(self, relative: Path) -> bool:
        """Whether a source file (relative to the source dir) is copied as-is."""
        if any(part.startswith("_") for part in relative.parts):
            return False

        directory = relative.parent.as_posix()
        directory = "" if directory == "." else directory
        ignored = [d for d in self.provider.ignored_directories() if d]
        if any(directory.startswith(prefix) for prefix in ignored):
            return False

        name = relative.name
        extension = name.rsplit(".", 1)[1] if "." in name else ""
        return extension not in self.provider.ignored_extensions()

    def _write(self, storage: OutputStorage, path: str, content: str, result: BuildResult) -> None:
        info = storage.write(path, content)
        result.bytes_written += info.size_bytes
