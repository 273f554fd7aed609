"""
Tests for mdi_icons.config.settings module.

This test suite covers:
- Settings loading and saving
- Default settings initialization
- Settings persistence to JSON file
- Validation of known keys and brush values
- Error handling for corrupted settings files
"""

import json

import pytest

from mdi_icons.config import settings


class TestLoadSettings:
    """Tests for load_settings() function."""

    def test_load_defaults_when_no_file(self, isolated_settings):
        """Test that default settings are loaded when file doesn't exist."""
        settings.settings_store.values = {}
        settings.load_settings()

        assert settings.settings_store.values == settings.DEFAULT_SETTINGS

    def test_load_from_existing_file(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(json.dumps({"default_brush": "white"}))

        settings.load_settings()

        assert settings.settings_store.values["default_brush"] == "white"

    def test_unknown_keys_are_dropped(self, isolated_settings):
        """Test keys without a default never reach the store."""
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(
            json.dumps({"default_brush": "white", "icons_dir": "/opt/icons"})
        )

        settings.load_settings()

        assert "icons_dir" not in settings.settings_store.values
        assert settings.get_setting("default_brush") == "white"

    def test_invalid_brush_falls_back_to_default(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(json.dumps({"default_brush": "not-a-colour"}))

        settings.load_settings()

        assert settings.get_setting("default_brush") == settings.DEFAULT_BRUSH

    def test_corrupted_file_uses_defaults(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text("{not json")

        settings.load_settings()

        assert settings.settings_store.values == settings.DEFAULT_SETTINGS

    def test_non_dict_json_ignored(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(json.dumps(["default_brush"]))

        settings.load_settings()

        assert settings.settings_store.values == settings.DEFAULT_SETTINGS


class TestSetSetting:
    """Tests for set_setting()/save_settings()."""

    def test_set_setting_persists(self, isolated_settings):
        """Test set_setting writes the file, creating parent directories."""
        settings.set_setting("default_brush", "#ffffff")

        data = json.loads(isolated_settings.read_text())
        assert data["default_brush"] == "#ffffff"
        assert settings.get_setting("default_brush") == "#ffffff"

    def test_round_trip_through_file(self, isolated_settings):
        settings.set_setting("default_brush", [255, 0, 0])
        settings.settings_store.values = {}

        settings.load_settings()

        assert settings.get_setting("default_brush") == [255, 0, 0]

    def test_unknown_key_rejected(self, isolated_settings):
        with pytest.raises(KeyError):
            settings.set_setting("icons_dir", "/opt/icons")
        assert not isolated_settings.exists()

    def test_invalid_brush_rejected(self, isolated_settings):
        with pytest.raises(ValueError):
            settings.set_setting("default_brush", "not-a-colour")
        assert settings.get_setting("default_brush") == settings.DEFAULT_BRUSH
        assert not isolated_settings.exists()

    def test_get_setting_default(self):
        assert settings.get_setting("missing", "fallback") == "fallback"


class TestDefaultBrush:
    """Tests for get_default_brush()."""

    def test_default_is_opaque_black(self):
        assert settings.get_default_brush() == (0, 0, 0, 255)

    def test_follows_setting(self, monkeypatch):
        monkeypatch.setitem(settings.settings_store.values, "default_brush", "#ffffff80")
        assert settings.get_default_brush() == (255, 255, 255, 128)
