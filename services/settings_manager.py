"""
Settings Manager.

Handles application settings with JSON file storage.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from typing import Optional
from pathlib import Path

from models.geometry import GridSize

logger = logging.getLogger(__name__)


@dataclass
class EditorSettings:
    """Editing policy: grid, snapping and nudging."""
    show_grid: bool = True
    grid_width: float = 50.0
    grid_height: float = 50.0
    snap_tolerance: float = 10.0
    drag_threshold: float = 1.0
    nudge_step: float = 1.0
    nudge_multiplier: float = 10.0
    hit_radius: float = 7.0

    def grid_size(self) -> Optional[GridSize]:
        """The snapping grid, or None when the grid is switched off."""
        if not self.show_grid:
            return None
        return GridSize(self.grid_width, self.grid_height)


@dataclass
class UISettings:
    """User interface settings."""
    code_style: str = "swiftui"
    code_pane_height: int = 150
    canvas_width: int = 480
    canvas_height: int = 300


@dataclass
class AppSettings:
    """Complete application settings."""
    editor: EditorSettings = field(default_factory=EditorSettings)
    ui: UISettings = field(default_factory=UISettings)
    window_geometry: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "editor": asdict(self.editor),
            "ui": asdict(self.ui),
            "window_geometry": self.window_geometry,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary, ignoring unknown keys."""
        settings = cls()

        if "editor" in data:
            known = EditorSettings.__dataclass_fields__
            settings.editor = EditorSettings(
                **{k: v for k, v in data["editor"].items() if k in known}
            )
        if "ui" in data:
            known = UISettings.__dataclass_fields__
            settings.ui = UISettings(
                **{k: v for k, v in data["ui"].items() if k in known}
            )
        if "window_geometry" in data:
            settings.window_geometry = data["window_geometry"]

        return settings


class SettingsManager:
    """
    Manages application settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/VectorPathEditor/settings.json
    - Linux: ~/.config/VectorPathEditor/settings.json
    - macOS: ~/Library/Application Support/VectorPathEditor/settings.json
    """

    APP_NAME = "VectorPathEditor"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self._ensure_settings_dir()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    @property
    def editor(self) -> EditorSettings:
        """Get editor settings."""
        return self._settings.editor

    # Convenience properties for common settings
    @property
    def show_grid(self) -> bool:
        return self._settings.editor.show_grid

    @show_grid.setter
    def show_grid(self, value: bool):
        self._settings.editor.show_grid = value
        self.save()

    @property
    def code_style(self) -> str:
        return self._settings.ui.code_style

    @code_style.setter
    def code_style(self, value: str):
        self._settings.ui.code_style = value
        self.save()

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        import platform
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def _ensure_settings_dir(self):
        """Create settings directory if it doesn't exist."""
        self._settings_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> bool:
        """Load settings from file."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Error loading settings from {self._settings_path}: {e}")
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._ensure_settings_dir()
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.warning(f"Error saving settings to {self._settings_path}: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()

    def save_window_geometry(self, geometry: bytes, state: bytes):
        """Save window geometry and state."""
        import base64
        self._settings.window_geometry = {
            "geometry": base64.b64encode(geometry).decode("ascii"),
            "state": base64.b64encode(state).decode("ascii"),
        }
        self.save()

    def get_window_geometry(self) -> tuple:
        """Get saved window geometry and state."""
        import base64
        import binascii
        geo = self._settings.window_geometry
        if not geo:
            return None, None

        try:
            geometry = base64.b64decode(geo.get("geometry", ""))
            state = base64.b64decode(geo.get("state", ""))
            return geometry, state
        except (binascii.Error, ValueError):
            return None, None


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings(config_override: Optional[str] = None) -> SettingsManager:
    """
    Get the global settings manager instance.

    Args:
        config_override: Optional path to override config location.
                        Only used on first call to initialize.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager(config_override)
    return _settings_manager


def reset_settings_manager():
    """Reset the global settings manager (useful for testing)."""
    global _settings_manager
    _settings_manager = None
