"""Unit tests for configuration and the settings store."""
import json
from pathlib import Path

import pytest

from personachat.conversation import ChatSession
from personachat.settings import (
    AppConfig,
    SettingsClosedError,
    SettingsStore,
    load_config,
)

from conftest import TEST_API_KEY


class TestSettingsStore:
    """Tests for SettingsStore."""

    def test_missing_file_yields_no_key(self, settings_path):
        with SettingsStore(settings_path) as store:
            assert store.api_key == ""
            assert not store.has_api_key
        assert not settings_path.exists()

    def test_key_survives_reopen(self, settings_path):
        """Test that a saved key is visible to a fresh store on the same file."""
        with SettingsStore(settings_path) as store:
            store.save_api_key(TEST_API_KEY)

        with SettingsStore(settings_path) as reopened:
            assert reopened.api_key == TEST_API_KEY

    @pytest.mark.asyncio
    async def test_conversation_not_persisted(self, settings_path, provider_factory):
        """Test that only the key survives a restart, not the chat history."""
        with SettingsStore(settings_path) as store:
            store.save_api_key(TEST_API_KEY)
            session = ChatSession(store, provider_factory=provider_factory)
            await session.send("Remember me")
            assert len(session.messages) == 2

        with SettingsStore(settings_path) as store:
            restarted = ChatSession(store, provider_factory=provider_factory)
            assert restarted.messages == ()
            assert store.has_api_key

    def test_file_uses_gemini_api_key_field(self, settings_path):
        with SettingsStore(settings_path) as store:
            store.save_api_key(TEST_API_KEY)

        data = json.loads(settings_path.read_text(encoding="utf-8"))
        assert data == {"gemini-api-key": TEST_API_KEY}

    def test_save_strips_whitespace(self, empty_settings):
        empty_settings.save_api_key(f"  {TEST_API_KEY}\n")
        assert empty_settings.api_key == TEST_API_KEY

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_key_rejected(self, keyed_settings, value):
        """Test that a blank save fails and keeps the previous key."""
        with pytest.raises(ValueError):
            keyed_settings.save_api_key(value)
        assert keyed_settings.api_key == TEST_API_KEY

    def test_save_overwrites(self, keyed_settings):
        keyed_settings.save_api_key("AIzaSy-another-key")
        assert keyed_settings.api_key == "AIzaSy-another-key"

    def test_clear_key_persisted(self, keyed_settings, settings_path):
        keyed_settings.clear_api_key()

        assert not keyed_settings.has_api_key
        with SettingsStore(settings_path) as reopened:
            assert reopened.api_key == ""

    def test_corrupt_file_yields_defaults(self, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("{not json", encoding="utf-8")

        with SettingsStore(settings_path) as store:
            assert store.api_key == ""
            store.save_api_key(TEST_API_KEY)

        assert json.loads(settings_path.read_text(encoding="utf-8"))["gemini-api-key"] == TEST_API_KEY

    def test_unopened_store_raises(self, settings_path):
        store = SettingsStore(settings_path)

        assert not store.is_open
        with pytest.raises(SettingsClosedError):
            _ = store.api_key
        with pytest.raises(SettingsClosedError):
            store.save_api_key(TEST_API_KEY)

    def test_closed_store_raises(self, settings_path):
        store = SettingsStore(settings_path).open()
        store.close()

        with pytest.raises(SettingsClosedError):
            store.clear_api_key()

    def test_no_temp_files_left_behind(self, keyed_settings, settings_path):
        keyed_settings.save_api_key("AIzaSy-rotated")

        assert [p.name for p in settings_path.parent.iterdir()] == ["settings.json"]


class TestLoadConfig:
    """Tests for environment-driven configuration."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for name in ("PERSONACHAT_HOME", "GEMINI_MODEL", "PERSONACHAT_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        config = load_config()

        assert config.data_dir == Path.home() / ".personachat"
        assert config.model == "gemini-2.0-flash"
        assert config.log_level is None
        assert config.settings_path == config.data_dir / "settings.json"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PERSONACHAT_HOME", str(tmp_path))
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
        monkeypatch.setenv("PERSONACHAT_LOG_LEVEL", "DEBUG")

        config = load_config()

        assert config.data_dir == tmp_path
        assert config.model == "gemini-2.5-flash"
        assert config.log_level == "debug"

    def test_config_is_frozen(self):
        config = AppConfig()

        with pytest.raises(ValueError):
            config.model = "other"  # type: ignore[misc]
