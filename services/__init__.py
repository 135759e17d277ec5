"""Services package."""

from .path_builder import CommandType, DrawCommand, build_path
from .code_generator import CodeStyle, PathCodeGenerator, generate_path_code
from .overlay import ElementMarker, GridLine, element_markers, grid_lines
from .editor_session import (
    HIT_RADIUS,
    HitKind,
    HitTarget,
    RenderOutput,
    EditorSession,
)
from .settings_manager import (
    SettingsManager,
    AppSettings,
    EditorSettings,
    UISettings,
    get_settings,
    reset_settings_manager,
)

__all__ = [
    # Path construction
    "CommandType",
    "DrawCommand",
    "build_path",
    # Code generation
    "CodeStyle",
    "PathCodeGenerator",
    "generate_path_code",
    # Overlay geometry
    "ElementMarker",
    "GridLine",
    "element_markers",
    "grid_lines",
    # Editor session
    "HIT_RADIUS",
    "HitKind",
    "HitTarget",
    "RenderOutput",
    "EditorSession",
    # Settings
    "SettingsManager",
    "AppSettings",
    "EditorSettings",
    "UISettings",
    "get_settings",
    "reset_settings_manager",
]
