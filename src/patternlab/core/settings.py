"""Process-level settings for patternlab.

The project's own ``config/config.ini`` describes *what* to compile (states,
ignored directories, engine). ``PatternLabSettings`` describes *how this
process runs*: where the project lives, how to log, whether cache busting is
suppressed. Values come from ``PATTERNLAB_*`` environment variables and
``.env`` files.

Examples:
    >>> from patternlab.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Tags:
    settings, configuration, pydantic, environment, patternlab

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PatternLabSettings(BaseSettings):
    """Environment-driven process settings.

    Fields
    ──────
    project_root : Directory holding ``config/`` and the source tree
    log_level    : Structlog log level
    log_format   : ``json``, ``console`` or ``auto`` (JSON unless a TTY)
    no_cache     : Force the cache-buster token to ``0``
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERNLAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_root: Path = Field(default_factory=Path.cwd)
    log_level: str = "INFO"
    log_format: str = "auto"
    no_cache: bool = False

    @property
    def json_logs(self) -> bool | None:
        if self.log_format == "json":
            return True
        if self.log_format == "console":
            return False
        return None


_settings_cache: dict[str, PatternLabSettings] = {}


def get_settings(*, _force_reload: bool = False) -> PatternLabSettings:
    """Load, validate, and cache a :class:`PatternLabSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = PatternLabSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
