"""Tests for patternlab.config: config.ini parsing and default generation."""

from unittest.mock import patch

import pytest

from patternlab.config import FILE_PATH_CONFIG, ConfigStore, default_config, parse_config
from patternlab.core.errors import ConfigError


class TestParseConfig:
    def test_quoted_values(self):
        assert parse_config('a = "one"\nb = \'two\'\n') == {"a": "one", "b": "two"}

    def test_comments_sections_and_invalid_lines_skipped(self):
        text = "; comment\n# another\n[section]\n\nnot an assignment\nkey = value\n"

        assert parse_config(text) == {"key": "value"}

    def test_inline_comment_on_unquoted_value(self):
        assert parse_config("key = value ; trailing\n") == {"key": "value"}

    def test_later_key_wins(self):
        assert parse_config('k = "1"\nk = "2"\n') == {"k": "2"}

    def test_empty_value(self):
        assert parse_config('k = ""\n') == {"k": ""}


class TestDefaultConfig:
    def test_placeholders_substituted(self):
        text = default_config("9.9.9", "jinja2")

        assert "$version$" not in text
        assert "$patternEngine$" not in text
        settings = parse_config(text)
        assert settings["v"] == "9.9.9"
        assert settings["patternEngine"] == "jinja2"
        assert settings["patternStates"] == "inprogress,inreview,complete"


class TestConfigStore:
    def test_missing_file_is_generated(self, tmp_path):
        store = ConfigStore(tmp_path, "0.1.0", "jinja2")

        settings = store.load()

        assert store.path == tmp_path / FILE_PATH_CONFIG
        assert store.path.is_file()
        assert settings["patternEngine"] == "jinja2"
        assert settings["sourceDir"] == "source"

    def test_existing_file_is_not_overwritten(self, tmp_path):
        path = tmp_path / FILE_PATH_CONFIG
        path.parent.mkdir(parents=True)
        path.write_text('patternEngine = "custom"\n')

        assert ConfigStore(tmp_path, "0.1.0", "jinja2").load() == {"patternEngine": "custom"}
        assert path.read_text() == 'patternEngine = "custom"\n'

    def test_unreadable_file_raises_config_error(self, tmp_path):
        store = ConfigStore(tmp_path, "0.1.0", "jinja2")
        store.load()

        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigError) as exc_info:
                store.load()
        assert exc_info.value.context.file_path == str(store.path)
