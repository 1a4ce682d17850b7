"""Tests for lfe.core.settings.

Covers:
- Defaults
- Environment variable override (LFE_ prefix)
- .env file support
- Settings cache
"""

from pathlib import Path

from lfe.core.settings import LfeSettings, clear_settings_cache, get_settings


class TestDefaults:
    def test_default_root(self):
        assert LfeSettings().root == Path(".")

    def test_default_features_dir(self):
        assert LfeSettings().features_dir == Path("lib/features")

    def test_default_flags_off(self):
        s = LfeSettings()
        assert s.ignore_duplicates is False
        assert s.warn_missing is False

    def test_default_logging(self):
        s = LfeSettings()
        assert s.log_level == "WARNING"
        assert s.log_json is None


class TestEnvOverride:
    def test_root_from_env(self, monkeypatch):
        monkeypatch.setenv("LFE_ROOT", "/opt/wlp")
        s = LfeSettings()
        assert s.root == Path("/opt/wlp")
        assert s.features_dir == Path("/opt/wlp/lib/features")

    def test_flags_from_env(self, monkeypatch):
        monkeypatch.setenv("LFE_IGNORE_DUPLICATES", "true")
        monkeypatch.setenv("LFE_WARN_MISSING", "1")
        s = LfeSettings()
        assert s.ignore_duplicates is True
        assert s.warn_missing is True

    def test_unprefixed_variable_ignored(self, monkeypatch):
        monkeypatch.setenv("ROOT", "/elsewhere")
        assert LfeSettings().root == Path(".")

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LFE_LOG_LEVEL=DEBUG\nLFE_LOG_JSON=false\n")
        s = LfeSettings()
        assert s.log_level == "DEBUG"
        assert s.log_json is False


class TestCache:
    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("LFE_ROOT", "/opt/wlp")
        assert get_settings().root == first.root
        clear_settings_cache()
        assert get_settings().root == Path("/opt/wlp")

    def test_force_reload(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("LFE_WARN_MISSING", "true")
        assert get_settings(_force_reload=True).warn_missing is True
