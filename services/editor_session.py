"""
Editor Session Service.

Owns the live Drawing for one editor window and translates host input
events (pointer, keyboard) into model operations. The host widget only
forwards events and paints whatever render() returns.

Usage:
    session = EditorSession(Drawing())
    session.drawingChanged.connect(canvas.update)

    session.pointer_down(Point(10, 10))
    session.pointer_drag(Point(60, 40))
    session.pointer_up(Point(60, 40))

    output = session.render(800, 600)

Gestures are previewed: while the pointer is down, renders read a copy of
the drawing (with the pending point applied, or with the anchor or handle
drag applied), and the live drawing only changes when the pointer is
released. Cancelling a gesture drops the copy.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from models.drawing import Direction, Drawing, Modifiers, PointerGesture
from models.geometry import GridSize, Point
from services.code_generator import CodeStyle, generate_path_code
from services.overlay import ElementMarker, GridLine, element_markers, grid_lines
from services.path_builder import DrawCommand, build_path

logger = logging.getLogger(__name__)


# Pointer capture radius around anchors and handles
HIT_RADIUS = 7.0


class HitKind(Enum):
    """What a pointer location landed on."""
    CANVAS = "canvas"
    ANCHOR = "anchor"
    PRIMARY_HANDLE = "primary_handle"       # Incoming handle
    SECONDARY_HANDLE = "secondary_handle"   # Outgoing handle


@dataclass(frozen=True)
class HitTarget:
    """Result of a hit test."""
    kind: HitKind = HitKind.CANVAS
    element_id: Optional[str] = None


@dataclass(frozen=True)
class RenderOutput:
    """Everything the canvas needs to paint one frame."""
    commands: List[DrawCommand]
    markers: List[ElementMarker]
    grid_lines: List[GridLine]


@dataclass
class _Press:
    """State of the pointer between press and release."""
    target: HitTarget
    start: Point
    dragged: bool = False
    working: Optional[Drawing] = None   # Copy edited by anchor and handle drags


class EditorSession(QObject):
    """
    Interactive editing session for a single drawing.

    Signals:
        drawingChanged(): Emitted when anything visible changed
        selectionChanged(): Emitted when the selection changed
    """

    drawingChanged = pyqtSignal()
    selectionChanged = pyqtSignal()

    def __init__(self, drawing: Optional[Drawing] = None,
                 hit_radius: float = HIT_RADIUS,
                 code_style: CodeStyle = CodeStyle.SWIFTUI,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._drawing = drawing if drawing is not None else Drawing()
        self.hit_radius = hit_radius
        self.code_style = CodeStyle(code_style)
        self._press: Optional[_Press] = None
        self._pending: Optional[PointerGesture] = None

    # ----- State -----

    @property
    def drawing(self) -> Drawing:
        """The committed drawing."""
        return self._drawing

    @property
    def pending_gesture(self) -> Optional[PointerGesture]:
        """The placement gesture in progress, if any."""
        return self._pending

    @property
    def live_drawing(self) -> Drawing:
        """The drawing to render, including any uncommitted gesture."""
        if self._press is not None and self._press.working is not None:
            return self._press.working
        if self._pending is None:
            return self._drawing
        return self._drawing.previewing(self._pending)

    def set_grid(self, grid: Optional[GridSize]):
        """Change or remove the snapping grid."""
        self._drawing.grid = grid
        self.drawingChanged.emit()

    def set_code_style(self, style: CodeStyle):
        self.code_style = CodeStyle(style)
        self.drawingChanged.emit()

    # ----- Hit testing -----

    def hit_test(self, location: Point) -> HitTarget:
        """
        Find the topmost anchor or visible handle under ``location``.

        Later elements sit above earlier ones; within an element the anchor
        sits above its handles.
        """
        markers = element_markers(self._drawing)
        for marker in reversed(markers):
            if marker.anchor.distance_to(location) <= self.hit_radius:
                return HitTarget(HitKind.ANCHOR, marker.element_id)
            if marker.control_points is not None:
                primary, secondary = marker.control_points
                if secondary.distance_to(location) <= self.hit_radius:
                    return HitTarget(HitKind.SECONDARY_HANDLE, marker.element_id)
                if primary.distance_to(location) <= self.hit_radius:
                    return HitTarget(HitKind.PRIMARY_HANDLE, marker.element_id)
        return HitTarget()

    # ----- Pointer events -----

    def pointer_down(self, location: Point, modifiers: Modifiers = Modifiers.NONE):
        """Pointer pressed at ``location``."""
        target = self.hit_test(location)
        self._press = _Press(target, location)
        logger.debug(f"Pointer down on {target.kind.value} at {location.to_tuple()}")

        if target.kind == HitKind.CANVAS:
            # Selection and placement are mutually exclusive per gesture
            if self._drawing.selection:
                self._drawing.clear_selection()
                self.selectionChanged.emit()
            self._pending = PointerGesture(location, location)
            self.drawingChanged.emit()
        else:
            self._press.working = self._drawing.copy()

    def pointer_drag(self, location: Point, modifiers: Modifiers = Modifiers.NONE):
        """Pointer moved to ``location`` while pressed."""
        press = self._press
        if press is None:
            return

        if press.target.kind == HitKind.CANVAS:
            self._pending = PointerGesture(press.start, location)
            self.drawingChanged.emit()
            return

        working = press.working
        element = working.get_element(press.target.element_id)
        if element is None:
            return

        # Only anchors wait for the threshold; handles follow the pointer at once
        if press.target.kind == HitKind.ANCHOR and not press.dragged:
            if press.start.distance_to(location) <= working.drag_threshold:
                return
        press.dragged = True

        decoupled = bool(modifiers & Modifiers.OPTION)
        grid = working.grid
        tolerance = working.snap_tolerance

        if press.target.kind == HitKind.ANCHOR:
            if not working.is_selected(element.id):
                working.toggle_select(element.id, exclusive=True)
            if decoupled:
                element.set_coupled_control_point(location)
            else:
                working.move_selection(location - element.anchor, snap=True)
        elif press.target.kind == HitKind.PRIMARY_HANDLE:
            element.move_secondary_control_point(location, grid, decoupled, tolerance)
        else:
            element.move_primary_control_point(location, grid, decoupled, tolerance)
        self.drawingChanged.emit()

    def pointer_up(self, location: Point, modifiers: Modifiers = Modifiers.NONE):
        """Pointer released at ``location``; commits the gesture in progress."""
        press = self._press
        self._press = None
        if press is None:
            return

        if press.target.kind == HitKind.CANVAS:
            self._pending = None
            self._drawing.add_point(PointerGesture(press.start, location))
            self.drawingChanged.emit()
        elif press.dragged:
            selection_changed = press.working.selection != self._drawing.selection
            self._drawing = press.working
            if selection_changed:
                self.selectionChanged.emit()
            self.drawingChanged.emit()
        elif press.target.kind == HitKind.ANCHOR:
            exclusive = not bool(modifiers & Modifiers.SHIFT)
            self._drawing.toggle_select(press.target.element_id, exclusive)
            self.selectionChanged.emit()
            self.drawingChanged.emit()

    def pointer_cancel(self):
        """Abandon the current gesture; the live drawing keeps its pre-gesture state."""
        if self._press is None and self._pending is None:
            return
        logger.debug("Pointer gesture cancelled")
        self._press = None
        self._pending = None
        self.drawingChanged.emit()

    def pointer_double_click(self, location: Point) -> bool:
        """
        Double-click at ``location``.

        Returns:
            True if an anchor was hit and its handles were reset
        """
        target = self.hit_test(location)
        if target.kind != HitKind.ANCHOR:
            return False
        element = self._drawing.get_element(target.element_id)
        element.reset_control_points()
        logger.debug(f"Reset control points of {element.id}")
        self.drawingChanged.emit()
        return True

    # ----- Keyboard events -----

    def key_direction(self, direction: Direction, amplified: bool = False):
        """Arrow key pressed; Shift passes ``amplified``."""
        if not self._drawing.selection:
            return
        self._drawing.move_by_direction(direction, amplified)
        self.drawingChanged.emit()

    def delete_key(self):
        """Delete or Backspace pressed."""
        if not self._drawing.selection:
            return
        self._drawing.delete_selection()
        self.selectionChanged.emit()
        self.drawingChanged.emit()

    # ----- Output -----

    def render(self, width: float, height: float) -> RenderOutput:
        """Draw commands, markers and grid lines for a canvas of the given size."""
        live = self.live_drawing
        return RenderOutput(
            commands=build_path(live.elements),
            markers=element_markers(live),
            grid_lines=grid_lines(live.grid, width, height),
        )

    def code(self) -> str:
        """Generated code for the committed drawing."""
        return generate_path_code(build_path(self._drawing.elements), self.code_style)


__all__ = [
    "HIT_RADIUS",
    "HitKind",
    "HitTarget",
    "RenderOutput",
    "EditorSession",
]
