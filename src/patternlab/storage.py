"""Filesystem helpers: source directory creation and the export output tree."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from patternlab.core.errors import ErrorCategory, PatternLabError
from patternlab.core.logging import get_logger

logger = get_logger(__name__)


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) if missing. Existing directories are left alone."""
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        logger.debug("directory_created", path=str(path))
    return path


@dataclass
class FileInfo:
    """Result of writing one output file."""

    path: str
    size_bytes: int


class OutputStorage:
    """
    Output tree for a static export.

    Stores files under a base directory with the relative path structure
    preserved. Paths that resolve outside the base directory are rejected.
    """

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path).resolve()
        ensure_directory(self.base_path)

    def _resolve_path(self, path: str) -> Path:
        clean_path = Path(path).as_posix().lstrip("/")
        full_path = self.base_path / clean_path

        try:
            full_path.resolve().relative_to(self.base_path)
        except ValueError:
            raise PatternLabError(
                f"Invalid path: {path} (outside output directory)",
                category=ErrorCategory.STORAGE,
            ).with_context(file_path=path)

        return full_path

    def write(self, path: str, content: bytes | str) -> FileInfo:
        """Write content, creating parent directories as needed."""
        full_path = self._resolve_path(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)

        if isinstance(content, str):
            content = content.encode("utf-8")

        full_path.write_bytes(content)
        logger.debug("file_written", path=path, size=len(content))
        return FileInfo(path=path, size_bytes=len(content))

    def copy(self, source: Path, path: str) -> FileInfo:
        """Copy an existing file into the output tree."""
        full_path = self._resolve_path(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, full_path)
        size = full_path.stat().st_size
        logger.debug("file_copied", source=str(source), path=path, size=size)
        return FileInfo(path=path, size_bytes=size)
