"""
Unit tests for the settings manager.

Tests:
- Defaults
- JSON round trip through the settings file
- Tolerance of unknown keys and corrupt files
"""

import json

from models.geometry import GridSize
from services.settings_manager import (
    AppSettings, EditorSettings, SettingsManager, get_settings, reset_settings_manager
)


class TestDefaults:
    """Tests for default settings values."""

    def test_editor_defaults(self):
        editor = EditorSettings()
        assert editor.grid_size() == GridSize(50, 50)
        assert editor.snap_tolerance == 10.0
        assert editor.drag_threshold == 1.0
        assert editor.nudge_multiplier == 10.0

    def test_grid_switched_off(self):
        assert EditorSettings(show_grid=False).grid_size() is None

    def test_new_file_not_created_until_save(self, temp_dir):
        path = temp_dir / "nested" / "settings.json"
        manager = SettingsManager(config_override=str(path))
        assert manager.settings_path == str(path)
        assert path.parent.exists()
        assert not path.exists()


class TestPersistence:
    """Tests for saving and loading."""

    def test_setters_save(self, settings_manager):
        settings_manager.show_grid = False
        settings_manager.code_style = "pyqt"

        reloaded = SettingsManager(config_override=settings_manager.settings_path)
        assert reloaded.show_grid is False
        assert reloaded.code_style == "pyqt"

    def test_file_is_json(self, settings_manager):
        settings_manager.editor.grid_width = 25.0
        assert settings_manager.save()
        with open(settings_manager.settings_path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["editor"]["grid_width"] == 25.0
        assert data["ui"]["code_style"] == "swiftui"

    def test_unknown_keys_ignored(self):
        settings = AppSettings.from_dict({
            "editor": {"grid_width": 20, "removed_option": True},
            "extra": 1,
        })
        assert settings.editor.grid_width == 20
        assert settings.ui.code_style == "swiftui"

    def test_corrupt_file_keeps_defaults(self, temp_dir):
        path = temp_dir / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        manager = SettingsManager(config_override=str(path))
        assert manager.editor == EditorSettings()

    def test_reset(self, settings_manager):
        settings_manager.show_grid = False
        settings_manager.reset()
        assert settings_manager.show_grid is True

    def test_window_geometry(self, settings_manager):
        settings_manager.save_window_geometry(b"\x01\x02", b"\x03")
        assert settings_manager.get_window_geometry() == (b"\x01\x02", b"\x03")

    def test_window_geometry_missing(self, settings_manager):
        assert settings_manager.get_window_geometry() == (None, None)


class TestGlobalInstance:
    """Tests for the shared settings manager."""

    def test_singleton(self, temp_dir):
        reset_settings_manager()
        try:
            first = get_settings(str(temp_dir / "settings.json"))
            assert get_settings() is first
        finally:
            reset_settings_manager()
