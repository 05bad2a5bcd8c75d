"""
Project configuration store.

Reads the flat ``key = "value"`` settings of ``config/config.ini`` under the
project root. When the file is missing, a default is generated from the
packaged template, with ``$version$`` and ``$patternEngine$`` substituted.

Parsing is line based, in the same spirit as the env-file loader: blank
lines, ``;``/``#`` comments, section headers and lines that are not
assignments are skipped; surrounding quotes are stripped; later keys win.

Tags:
    configuration, ini, settings, patternlab

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

import re
from importlib import resources
from pathlib import Path

from patternlab.core.errors import ConfigError
from patternlab.core.logging import get_logger

logger = get_logger(__name__)

# The path to the config file, relative to the project root
FILE_PATH_CONFIG = Path("config") / "config.ini"

DEFAULT_CONFIG_RESOURCE = "config.ini.default"

_SETTING_RE = re.compile(
    r"""
    ^                         # start of line
    \s*                       # optional leading whitespace
    (?P<key>[A-Za-z_][\w.-]*) # setting name
    \s*=\s*                   # equals with optional whitespace
    (?P<value>.*)             # everything after =
    $                         # end of line
    """,
    re.VERBOSE,
)


def parse_config(text: str) -> dict[str, str]:
    """Parse config file text into a ``{key: value}`` mapping."""
    result: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line[0] in ";#[":
            continue
        match = _SETTING_RE.match(line)
        if match is None:
            continue
        key = match.group("key")
        value = match.group("value").strip()

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        else:
            for marker in (" ;", " #"):
                if marker in value:
                    value = value[: value.index(marker)].rstrip()

        result[key] = value
    return result


def default_config(version: str, pattern_engine: str) -> str:
    """The packaged default configuration with placeholders substituted."""
    template = (
        resources.files("patternlab.templates")
        .joinpath(DEFAULT_CONFIG_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return template.replace("$version$", version).replace("$patternEngine$", pattern_engine)


class ConfigStore:
    """Loads ``config/config.ini`` for a project, generating it when missing."""

    def __init__(self, project_root: Path, version: str, default_engine: str):
        self.project_root = Path(project_root)
        self.version = version
        self.default_engine = default_engine

    @property
    def path(self) -> Path:
        return self.project_root / FILE_PATH_CONFIG

    def load(self) -> dict[str, str]:
        """Read the settings, creating the default file first if needed.

        Raises:
            ConfigError: the file can neither be created nor read
        """
        path = self.path
        if not path.exists():
            self._write_default(path)

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read config file: {e}", cause=e).with_context(
                file_path=str(path)
            ) from e

        settings = parse_config(text)
        logger.debug("config_loaded", path=str(path), settings=len(settings))
        return settings

    def _write_default(self, path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(default_config(self.version, self.default_engine), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not create default config file: {e}", cause=e).with_context(
                file_path=str(path)
            ) from e
        logger.info("config_created", path=str(path), engine=self.default_engine)
