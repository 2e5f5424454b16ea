"""Tests for settings and store path bootstrap."""

import pytest
from pathlib import Path

from quoteit.config import (
    DEFAULT_DATA_DIR_NAME,
    EnvironmentSetupError,
    QuoteItSettings,
    get_settings,
    resolve_store_path,
)


class TestSettings:
    """Tests for QuoteItSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("QUOTE_IT_DATA_DIR", raising=False)
        monkeypatch.delenv("QUOTE_IT_LOG_LEVEL", raising=False)
        settings = QuoteItSettings()
        assert settings.data_dir is None
        assert settings.db_filename == "quotes.db"
        assert settings.log_level == "WARNING"

    def test_env_overrides(self, monkeypatch, tmp_path):
        """Test QUOTE_IT_* variables are picked up."""
        monkeypatch.setenv("QUOTE_IT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("QUOTE_IT_LOG_LEVEL", "debug")
        settings = QuoteItSettings()
        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            QuoteItSettings(log_level="chatty")

    def test_default_data_dir_is_under_home(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        settings = QuoteItSettings(data_dir=None)
        assert settings.resolve_data_dir() == tmp_path / DEFAULT_DATA_DIR_NAME

    def test_unresolvable_home(self, monkeypatch):
        """Test a missing home directory is an environment error."""
        def no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(no_home))
        with pytest.raises(EnvironmentSetupError, match="home directory"):
            QuoteItSettings(data_dir=None).resolve_data_dir()

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestResolveStorePath:
    """Tests for lazy creation of the store location."""

    def test_creates_directory_and_file(self, tmp_path):
        settings = QuoteItSettings(data_dir=tmp_path / "a" / "b")
        path = resolve_store_path(settings)
        assert path == tmp_path / "a" / "b" / "quotes.db"
        assert path.is_file()
        assert path.stat().st_size == 0

    def test_leaves_existing_file_alone(self, tmp_path):
        existing = tmp_path / "quotes.db"
        existing.write_bytes(b"keep me")
        path = resolve_store_path(QuoteItSettings(data_dir=tmp_path))
        assert path == existing
        assert existing.read_bytes() == b"keep me"

    def test_directory_creation_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(EnvironmentSetupError, match="Failed to create quotes directory"):
            resolve_store_path(QuoteItSettings(data_dir=blocker / "sub"))

    def test_file_creation_failure(self, tmp_path):
        """Test a store filename that cannot be created is reported."""
        settings = QuoteItSettings(data_dir=tmp_path, db_filename="missing/quotes.db")
        with pytest.raises(EnvironmentSetupError, match="Quote file creation failed"):
            resolve_store_path(settings)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
