"""Tests for patternlab.storage: directory creation and the export output tree."""

import pytest

from patternlab.core.errors import ErrorCategory, PatternLabError
from patternlab.storage import OutputStorage, ensure_directory


class TestEnsureDirectory:
    def test_creates_nested(self, tmp_path):
        path = ensure_directory(tmp_path / "a" / "b")

        assert path.is_dir()

    def test_existing_directory_untouched(self, tmp_path):
        marker = tmp_path / "keep.txt"
        marker.write_text("x")

        ensure_directory(tmp_path)

        assert marker.read_text() == "x"


class TestOutputStorage:
    def test_write_creates_parents(self, tmp_path):
        storage = OutputStorage(tmp_path / "public")

        info = storage.write("patterns/a/a.html", "<p>é</p>")

        assert (tmp_path / "public/patterns/a/a.html").read_text(encoding="utf-8") == "<p>é</p>"
        assert info.size_bytes == len("<p>é</p>".encode("utf-8"))

    def test_leading_slash_stays_inside(self, tmp_path):
        storage = OutputStorage(tmp_path / "public")

        storage.write("/styleguide/data.js", "x")

        assert (tmp_path / "public/styleguide/data.js").is_file()

    def test_escaping_path_rejected(self, tmp_path):
        storage = OutputStorage(tmp_path / "public")

        with pytest.raises(PatternLabError) as exc_info:
            storage.write("../outside.txt", "x")
        assert exc_info.value.category is ErrorCategory.STORAGE
        assert not (tmp_path / "outside.txt").exists()

    def test_copy(self, tmp_path):
        source = tmp_path / "logo.png"
        source.write_bytes(b"\x00\x01")
        storage = OutputStorage(tmp_path / "public")

        info = storage.copy(source, "images/logo.png")

        assert (tmp_path / "public/images/logo.png").read_bytes() == b"\x00\x01"
        assert info.size_bytes == 2
