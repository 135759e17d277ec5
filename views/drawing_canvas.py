"""
Drawing canvas for interactive path editing.

A plain QWidget that forwards mouse and keyboard events to an
EditorSession and paints the session's render output: grid, path,
handle guide lines, control handles and anchor markers.
"""

from typing import List, Optional

from PyQt6.QtCore import Qt, QPointF, QRectF, pyqtSignal
from PyQt6.QtGui import (
    QPainter, QPen, QBrush, QColor, QPainterPath, QMouseEvent, QKeyEvent
)
from PyQt6.QtWidgets import QWidget

from models import Direction, Modifiers, Point
from services.editor_session import EditorSession
from services.path_builder import CommandType, DrawCommand


# Color scheme
COLORS = {
    "background": QColor("#FFFFFF"),
    "grid": QColor("#E5E5E5"),             # Light gray
    "path": QColor("#000000"),
    "guide": QColor("#9CA3AF"),            # Gray
    "anchor": QColor("#000000"),
    "selection": QColor("#3B82F6"),        # Bright blue
    "handle_fill": QColor("#FFFFFF"),
}

# Marker sizes in pixels
ANCHOR_SIZE = 10
HANDLE_SIZE = 6

_ARROW_KEYS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
}


def _to_qpoint(p: Point) -> QPointF:
    return QPointF(p.x, p.y)


def _to_point(p: QPointF) -> Point:
    return Point(p.x(), p.y())


def _modifiers(qt_modifiers) -> Modifiers:
    """Map Qt keyboard modifiers to editor modifiers."""
    modifiers = Modifiers.NONE
    if qt_modifiers & Qt.KeyboardModifier.ShiftModifier:
        modifiers |= Modifiers.SHIFT
    if qt_modifiers & Qt.KeyboardModifier.AltModifier:
        modifiers |= Modifiers.OPTION
    return modifiers


def to_painter_path(commands: List[DrawCommand]) -> QPainterPath:
    """Convert draw commands into a QPainterPath."""
    path = QPainterPath()
    for command in commands:
        to = _to_qpoint(command.to)
        if command.command_type == CommandType.MOVE:
            path.moveTo(to)
        elif command.command_type == CommandType.LINE:
            path.lineTo(to)
        elif command.command_type == CommandType.QUAD_CURVE:
            path.quadTo(_to_qpoint(command.control1), to)
        else:
            path.cubicTo(_to_qpoint(command.control1), _to_qpoint(command.control2), to)
    return path


class DrawingCanvas(QWidget):
    """
    Canvas widget for placing and editing path points.

    Mouse:
        Click / drag on empty canvas: add a corner / smooth point
        Click anchor: select (Shift toggles)
        Drag anchor: move selection (Alt re-couples the handles)
        Drag handle: reshape (Alt breaks handle symmetry)
        Double-click anchor: reset to a corner point
    Keyboard:
        Arrows: nudge selection (Shift x10)
        Delete / Backspace: delete selection
        Escape: cancel the current gesture
    """

    # Signals
    codeChanged = pyqtSignal(str)

    def __init__(self, session: EditorSession, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.session = session

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(False)
        self.setAutoFillBackground(False)

        self.session.drawingChanged.connect(self._on_drawing_changed)

    def _on_drawing_changed(self):
        self.update()
        self.codeChanged.emit(self.session.code())

    # ----- Painting -----

    def paintEvent(self, event):
        """Paint grid, path and markers."""
        output = self.session.render(self.width(), self.height())

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), COLORS["background"])

        # Grid
        painter.setPen(QPen(COLORS["grid"], 1))
        for line in output.grid_lines:
            painter.drawLine(_to_qpoint(line.start), _to_qpoint(line.end))

        # Path
        painter.setPen(QPen(COLORS["path"], 2))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(to_painter_path(output.commands))

        for marker in output.markers:
            if marker.shows_control_points:
                self._paint_handles(painter, marker)
            self._paint_anchor(painter, marker)

        painter.end()

    def _paint_handles(self, painter: QPainter, marker):
        """Guide line and square handles for one element."""
        guide = marker.guide_line
        painter.setPen(QPen(COLORS["guide"], 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for start, end in zip(guide, guide[1:]):
            painter.drawLine(_to_qpoint(start), _to_qpoint(end))

        painter.setPen(QPen(COLORS["anchor"], 1))
        painter.setBrush(QBrush(COLORS["handle_fill"]))
        half = HANDLE_SIZE / 2
        for p in marker.control_points:
            painter.drawRoundedRect(QRectF(p.x - half, p.y - half, HANDLE_SIZE, HANDLE_SIZE), 2, 2)

    def _paint_anchor(self, painter: QPainter, marker):
        """Circle marker, blue and thicker when selected."""
        color = COLORS["selection"] if marker.selected else COLORS["anchor"]
        painter.setPen(QPen(color, 2 if marker.selected else 1))
        painter.setBrush(QBrush(COLORS["handle_fill"]))
        painter.drawEllipse(_to_qpoint(marker.anchor), ANCHOR_SIZE / 2, ANCHOR_SIZE / 2)

    # ----- Mouse -----

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.setFocus()
            self.session.pointer_down(_to_point(event.position()), _modifiers(event.modifiers()))
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if event.buttons() & Qt.MouseButton.LeftButton:
            self.session.pointer_drag(_to_point(event.position()), _modifiers(event.modifiers()))
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.session.pointer_up(_to_point(event.position()), _modifiers(event.modifiers()))
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def mouseDoubleClickEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseDoubleClickEvent(event)
            return
        location = _to_point(event.position())
        # Qt replaces the second press with this event
        if not self.session.pointer_double_click(location):
            self.session.pointer_down(location, _modifiers(event.modifiers()))
        event.accept()

    def focusOutEvent(self, event):
        self.session.pointer_cancel()
        super().focusOutEvent(event)

    # ----- Keyboard -----

    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard shortcuts."""
        key = event.key()
        if key in _ARROW_KEYS:
            amplified = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
            self.session.key_direction(_ARROW_KEYS[key], amplified)
            event.accept()
        elif key in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace):
            self.session.delete_key()
            event.accept()
        elif key == Qt.Key.Key_Escape:
            self.session.pointer_cancel()
            event.accept()
        else:
            super().keyPressEvent(event)
