"""Tests for patternlab.core.settings: PATTERNLAB_* process settings."""

from pathlib import Path

from patternlab.core.settings import PatternLabSettings, clear_settings_cache, get_settings


class TestPatternLabSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("PROJECT_ROOT", "LOG_LEVEL", "LOG_FORMAT", "NO_CACHE"):
            monkeypatch.delenv(f"PATTERNLAB_{name}", raising=False)

        settings = PatternLabSettings()

        assert settings.project_root.resolve() == Path(tmp_path).resolve()
        assert settings.log_level == "INFO"
        assert settings.no_cache is False
        assert settings.json_logs is None

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PATTERNLAB_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("PATTERNLAB_LOG_FORMAT", "json")
        monkeypatch.setenv("PATTERNLAB_NO_CACHE", "true")

        settings = PatternLabSettings()

        assert settings.project_root == tmp_path
        assert settings.json_logs is True
        assert settings.no_cache is True

    def test_console_format(self, monkeypatch):
        monkeypatch.setenv("PATTERNLAB_LOG_FORMAT", "console")

        assert PatternLabSettings().json_logs is False


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload_and_clear(self):
        first = get_settings()

        assert get_settings(_force_reload=True) is not first
        clear_settings_cache()
        assert get_settings() is not first
