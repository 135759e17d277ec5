"""
Main application window.

Assembles the drawing canvas and the generated-code pane.
"""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QSplitter, QStatusBar

from models import Drawing
from services import CodeStyle, EditorSession, get_settings
from views.code_view import CodeView
from views.drawing_canvas import DrawingCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.

    Layout:
    ┌─────────────────────────────────────┐
    │  Menu Bar                           │
    ├─────────────────────────────────────┤
    │                                     │
    │            Drawing Canvas           │
    │                                     │
    ├─────────────────────────────────────┤
    │  Generated Code (read-only)         │
    ├─────────────────────────────────────┤
    │  Status Bar                         │
    └─────────────────────────────────────┘
    """

    def __init__(self):
        super().__init__()

        # Settings manager (JSON file based)
        self.settings_manager = get_settings()
        editor_settings = self.settings_manager.editor

        # Session owning the live drawing
        self.session = EditorSession(
            Drawing.from_settings(editor_settings),
            hit_radius=editor_settings.hit_radius,
            code_style=self._load_code_style(),
            parent=self,
        )

        # Setup
        self._setup_window()
        self._setup_menu()
        self._setup_central_widget()
        self._setup_status_bar()
        self._connect_signals()

        # Restore window geometry
        self._load_window_settings()
        self.code_view.set_code(self.session.code())

    def _load_code_style(self) -> CodeStyle:
        """Code style from settings, falling back to SwiftUI."""
        try:
            return CodeStyle(self.settings_manager.code_style)
        except ValueError:
            logger.warning(f"Unknown code style in settings: {self.settings_manager.code_style!r}")
            return CodeStyle.SWIFTUI

    def _load_window_settings(self):
        """Restore window geometry and state."""
        geometry, state = self.settings_manager.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)
        if state:
            self.restoreState(state)

    def _save_window_settings(self):
        """Save window geometry and state."""
        self.settings_manager.save_window_geometry(
            self.saveGeometry(),
            self.saveState()
        )

    def closeEvent(self, event):
        """Handle window close - save settings."""
        self._save_window_settings()
        super().closeEvent(event)

    def _setup_window(self):
        """Configure window properties."""
        ui = self.settings_manager.settings.ui
        self.setWindowTitle("Vector Path Editor")
        self.resize(ui.canvas_width, ui.canvas_height + ui.code_pane_height)

        self.setStyleSheet("""
            QMainWindow {
                background: #FFFFFF;
            }
            QSplitter::handle {
                background: #E5E7EB;
            }
            QSplitter::handle:vertical {
                height: 1px;
            }
        """)

    def _setup_menu(self):
        """Create menu bar."""
        menubar = self.menuBar()

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        delete_action = QAction("&Delete Selected", self)
        delete_action.setShortcut(QKeySequence.StandardKey.Delete)
        delete_action.triggered.connect(self.session.delete_key)
        edit_menu.addAction(delete_action)

        # View menu
        view_menu = menubar.addMenu("&View")

        self._show_grid_action = QAction("Show &Grid", self)
        self._show_grid_action.setCheckable(True)
        self._show_grid_action.setChecked(self.settings_manager.show_grid)
        self._show_grid_action.setShortcut("Ctrl+G")
        self._show_grid_action.toggled.connect(self._on_toggle_grid)
        view_menu.addAction(self._show_grid_action)

        code_menu = view_menu.addMenu("&Code Style")
        style_group = QActionGroup(self)
        for style, label in ((CodeStyle.SWIFTUI, "&SwiftUI"), (CodeStyle.PYQT, "&PyQt")):
            action = QAction(label, self)
            action.setCheckable(True)
            action.setChecked(style == self.session.code_style)
            action.triggered.connect(lambda checked, s=style: self._on_code_style(s))
            style_group.addAction(action)
            code_menu.addAction(action)

    def _setup_central_widget(self):
        """Canvas above the code pane."""
        splitter = QSplitter(Qt.Orientation.Vertical)

        self.canvas = DrawingCanvas(self.session)
        splitter.addWidget(self.canvas)

        self.code_view = CodeView()
        splitter.addWidget(self.code_view)

        ui = self.settings_manager.settings.ui
        splitter.setSizes([ui.canvas_height, ui.code_pane_height])
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 0)

        self.setCentralWidget(splitter)
        self.canvas.setFocus()

    def _setup_status_bar(self):
        """Create status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self._update_status()

    def _connect_signals(self):
        """Connect component signals."""
        self.canvas.codeChanged.connect(self.code_view.set_code)
        self.session.drawingChanged.connect(self._update_status)
        self.session.selectionChanged.connect(self._update_status)

    def _update_status(self):
        drawing = self.session.drawing
        grid = drawing.grid
        grid_text = f"grid {grid.width:g}x{grid.height:g}" if grid else "no grid"
        self.status_bar.showMessage(
            f"{len(drawing.elements)} points, {len(drawing.selection)} selected, {grid_text}"
        )

    def _on_toggle_grid(self, checked: bool):
        """Switch grid snapping and the grid overlay on or off."""
        self.settings_manager.show_grid = checked
        self.session.set_grid(self.settings_manager.editor.grid_size())

    def _on_code_style(self, style: CodeStyle):
        self.settings_manager.code_style = style.value
        self.session.set_code_style(style)
