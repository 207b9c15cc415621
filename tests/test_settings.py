"""Tests for configuration and component wiring."""

from pathlib import Path

import pytest

from savesmart.config import (
    AppSettings,
    OnboardingSettings,
    get_settings,
    validate_all_settings,
)
from savesmart.orchestrator import create_app_components, create_storage, default_show_validation
from savesmart.storage import InMemoryFormStorage, JsonFileFormStorage


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Isolate every test from the developer's environment and .env."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "SAVESMART_STORAGE_DIR",
        "SAVESMART_STORAGE_KEY_PREFIX",
        "SAVESMART_SHOW_VALIDATION",
        "SAVESMART_AUTOSAVE_ENABLED",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for settings loading."""

    def test_defaults(self):
        """Test default onboarding settings."""
        settings = OnboardingSettings()
        assert settings.storage_dir == Path(".savesmart")
        assert settings.storage_key_prefix == "budgeting-profile-"
        assert settings.draft_key == "form-data"
        assert settings.autosave_enabled is True
        assert settings.show_validation is True

    def test_env_override(self, monkeypatch):
        """Test settings are read from SAVESMART_ variables."""
        monkeypatch.setenv("SAVESMART_SHOW_VALIDATION", "false")
        monkeypatch.setenv("SAVESMART_STORAGE_DIR", "/tmp/drafts")
        settings = OnboardingSettings()
        assert settings.show_validation is False
        assert settings.storage_dir == Path("/tmp/drafts")

    def test_invalid_prefix_rejected(self, monkeypatch):
        """Test path separators are rejected in the key prefix."""
        monkeypatch.setenv("SAVESMART_STORAGE_KEY_PREFIX", "../evil")
        with pytest.raises(ValueError):
            OnboardingSettings()

    def test_log_level_normalized(self, monkeypatch):
        """Test log levels are upper-cased and checked."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert AppSettings().log_level == "DEBUG"
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValueError):
            AppSettings()

    def test_validate_all_settings(self, monkeypatch):
        """Test the status report flags broken groups."""
        assert validate_all_settings() == {"onboarding": True, "app": True}

        monkeypatch.setenv("LOG_LEVEL", "chatty")
        status = validate_all_settings()
        assert status["onboarding"] is True
        assert status["app"] is False
        assert "app_error" in status


class TestWiring:
    """Tests for component creation."""

    def test_create_storage_on_disk(self, monkeypatch, tmp_path):
        """Test file storage is created in the configured directory."""
        monkeypatch.setenv("SAVESMART_STORAGE_DIR", str(tmp_path / "drafts"))
        storage = create_storage(use_storage=True)
        assert isinstance(storage, JsonFileFormStorage)
        assert storage.directory == tmp_path / "drafts"

    def test_create_storage_in_memory(self):
        """Test use_storage=False keeps drafts in memory."""
        assert isinstance(create_storage(use_storage=False), InMemoryFormStorage)

    def test_unusable_directory_falls_back_to_memory(self, monkeypatch, tmp_path):
        """Test an unusable directory falls back to in-memory storage."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        monkeypatch.setenv("SAVESMART_STORAGE_DIR", str(blocker / "drafts"))
        assert isinstance(create_storage(use_storage=True), InMemoryFormStorage)

    def test_create_app_components(self):
        """Test the factory wires controller, storage and logger together."""
        controller, storage, audit_logger = create_app_components(use_storage=False)
        controller.toggle_expense_category("Food")
        assert storage.load("form-data") is not None
        assert audit_logger.correlation_id is not None

    def test_default_show_validation(self, monkeypatch):
        """Test explicit overrides win over settings."""
        assert default_show_validation() is True
        assert default_show_validation(False) is False
        monkeypatch.setenv("SAVESMART_SHOW_VALIDATION", "0")
        assert default_show_validation() is False
