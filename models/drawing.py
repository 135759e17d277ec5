"""
Drawing data models.

This module defines the editable curve model behind the canvas.

Key concepts:
- Element: One anchor on the curve with optional bezier handles
- PrimaryControl: Whether the incoming handle mirrors the outgoing one
  or has been decoupled and positioned explicitly
- PointerGesture: A placement gesture (press location + current location)
- Drawing: Ordered elements, the selection, and the snapping grid

The outgoing handle (secondary control point) is the one users author by
dragging out a new point. The incoming handle (primary control point) is
derived as its mirror image until the user breaks the symmetry.
"""

import logging
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum, Flag, auto
from typing import Dict, List, Optional, Set, Tuple

from .geometry import GridSize, Point, SNAP_TOLERANCE, snap_point

logger = logging.getLogger(__name__)


# Default policy values
DEFAULT_GRID = GridSize(50, 50)
DRAG_THRESHOLD = 1.0
NUDGE_STEP = 1.0
NUDGE_MULTIPLIER = 10.0


# =============================================================================
# Enumerations
# =============================================================================

class PrimaryControlMode(Enum):
    """How an element's incoming handle is determined."""
    DERIVED = "derived"     # Mirror of the outgoing handle about the anchor
    EXPLICIT = "explicit"   # Positioned independently by the user


class Direction(Enum):
    """Arrow key directions for keyboard nudging."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Modifiers(Flag):
    """Modifier keys held during a pointer event."""
    NONE = 0
    SHIFT = auto()
    OPTION = auto()  # Alt on non-Mac keyboards


# =============================================================================
# Helper Functions
# =============================================================================

def _generate_id() -> str:
    """Generate a unique element ID."""
    return uuid.uuid4().hex


# Unit offsets per direction, y grows downward
_DIRECTION_OFFSETS = {
    Direction.UP: (0.0, -1.0),
    Direction.DOWN: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
}


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class PrimaryControl:
    """
    Tagged choice for the incoming handle: derived or explicit.

    Attributes:
        mode: DERIVED or EXPLICIT
        point: The explicit position (only set when mode is EXPLICIT)
    """
    mode: PrimaryControlMode = PrimaryControlMode.DERIVED
    point: Optional[Point] = None

    @classmethod
    def derived(cls) -> "PrimaryControl":
        return cls()

    @classmethod
    def explicit(cls, point: Point) -> "PrimaryControl":
        return cls(PrimaryControlMode.EXPLICIT, point)

    @property
    def is_explicit(self) -> bool:
        return self.mode == PrimaryControlMode.EXPLICIT


@dataclass
class Element:
    """
    One anchor of the curve.

    Attributes:
        anchor: On-curve location
        secondary_control_point: Outgoing handle, None for a corner point
        primary_control: Incoming handle, derived from the outgoing one
            unless explicitly decoupled
        id: Stable identifier, never reused
    """
    anchor: Point
    secondary_control_point: Optional[Point] = None
    primary_control: PrimaryControl = field(default_factory=PrimaryControl.derived)
    id: str = field(default_factory=_generate_id)

    def __post_init__(self):
        """Round stored points."""
        self.anchor = self.anchor.rounded()
        if self.secondary_control_point is not None:
            self.secondary_control_point = self.secondary_control_point.rounded()
        if self.primary_control.is_explicit:
            self.primary_control = PrimaryControl.explicit(self.primary_control.point.rounded())

    @property
    def explicit_primary_control_point(self) -> Optional[Point]:
        """The decoupled incoming handle, if one has been recorded."""
        if self.primary_control.is_explicit:
            return self.primary_control.point
        return None

    @property
    def primary_control_point(self) -> Optional[Point]:
        """Incoming handle: explicit value, else mirror of the outgoing one."""
        if self.primary_control.is_explicit:
            return self.primary_control.point
        if self.secondary_control_point is None:
            return None
        return self.secondary_control_point.mirrored(self.anchor)

    @property
    def control_points(self) -> Optional[Tuple[Point, Point]]:
        """(primary, secondary) when both handles exist, else None."""
        primary = self.primary_control_point
        if primary is None or self.secondary_control_point is None:
            return None
        return (primary, self.secondary_control_point)

    def move_anchor(self, to: Point, grid: Optional[GridSize] = None,
                    tolerance: float = SNAP_TOLERANCE):
        """
        Move the anchor, carrying the outgoing handle along.

        An explicit incoming handle stays where it is.
        """
        target = snap_point(to, grid, tolerance).rounded()
        diff = target - self.anchor
        self.anchor = target
        if self.secondary_control_point is not None:
            self.secondary_control_point = self.secondary_control_point + diff

    def move_by_offset(self, delta: Point, grid: Optional[GridSize] = None,
                       tolerance: float = SNAP_TOLERANCE):
        """Move the anchor by a relative offset."""
        self.move_anchor(self.anchor + delta, grid, tolerance)

    def move_secondary_control_point(self, to: Point, grid: Optional[GridSize] = None,
                                     decoupled: bool = False,
                                     tolerance: float = SNAP_TOLERANCE):
        """
        Drag the handle drawn at the incoming (primary) position.

        Once decoupled, or when the symmetry was already broken, ``to``
        becomes the explicit incoming handle and the outgoing handle is left
        alone. Otherwise the outgoing handle is set to the mirror of ``to``,
        which keeps the derived incoming handle under the pointer.

        Args:
            to: New location of the dragged handle
            grid: Snapping grid, or None for free movement
            decoupled: True while the decouple modifier is held
            tolerance: Snap capture distance
        """
        target = snap_point(to, grid, tolerance).rounded()
        if decoupled or self.primary_control.is_explicit:
            self.primary_control = PrimaryControl.explicit(target)
        else:
            self.secondary_control_point = target.mirrored(self.anchor)

    def move_primary_control_point(self, to: Point, grid: Optional[GridSize] = None,
                                   decoupled: bool = False,
                                   tolerance: float = SNAP_TOLERANCE):
        """
        Drag the handle drawn at the outgoing (secondary) position.

        With ``decoupled`` set and no explicit incoming handle yet, the
        current mirrored value is frozen first so it stops following.

        Args:
            to: New location of the dragged handle
            grid: Snapping grid, or None for free movement
            decoupled: True while the decouple modifier is held
            tolerance: Snap capture distance
        """
        target = snap_point(to, grid, tolerance).rounded()
        if decoupled and not self.primary_control.is_explicit:
            mirrored = self.primary_control_point
            if mirrored is not None:
                self.primary_control = PrimaryControl.explicit(mirrored)
        self.secondary_control_point = target

    def reset_control_points(self):
        """Turn the element back into a plain corner point."""
        self.primary_control = PrimaryControl.derived()
        self.secondary_control_point = None

    def set_coupled_control_point(self, to: Point):
        """Set the outgoing handle and restore mirroring of the incoming one."""
        self.primary_control = PrimaryControl.derived()
        self.secondary_control_point = to.rounded()

    def copy(self) -> "Element":
        """Value copy that keeps the same ID."""
        return replace(self)


@dataclass(frozen=True)
class PointerGesture:
    """
    A pointer gesture on the empty canvas.

    Attributes:
        start: Where the pointer went down
        location: Where the pointer is now (or was released)
    """
    start: Point
    location: Point

    @property
    def distance(self) -> float:
        return self.start.distance_to(self.location)

    def is_drag(self, threshold: float = DRAG_THRESHOLD) -> bool:
        """True when the pointer travelled further than ``threshold``."""
        return self.distance > threshold


@dataclass
class Drawing:
    """
    The complete editable drawing.

    Attributes:
        elements: Anchors in curve traversal order
        selection: IDs of the selected elements
        grid: Snapping grid, None for free movement
        snap_tolerance: Capture distance for grid snapping
        drag_threshold: Pointer travel that turns a click into a drag
        nudge_step: Arrow key movement in canvas units
        nudge_multiplier: Factor applied to nudges with Shift held
    """
    elements: List[Element] = field(default_factory=list)
    selection: Set[str] = field(default_factory=set)
    grid: Optional[GridSize] = DEFAULT_GRID
    snap_tolerance: float = SNAP_TOLERANCE
    drag_threshold: float = DRAG_THRESHOLD
    nudge_step: float = NUDGE_STEP
    nudge_multiplier: float = NUDGE_MULTIPLIER
    # id -> position in elements, rebuilt whenever an entry goes stale
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    @classmethod
    def from_settings(cls, settings) -> "Drawing":
        """Create an empty drawing from EditorSettings."""
        return cls(
            grid=settings.grid_size(),
            snap_tolerance=settings.snap_tolerance,
            drag_threshold=settings.drag_threshold,
            nudge_step=settings.nudge_step,
            nudge_multiplier=settings.nudge_multiplier,
        )

    # ----- Queries -----

    def get_element(self, element_id: str) -> Optional[Element]:
        """Find an element by ID in constant time on average."""
        element = self._indexed(element_id)
        if element is None:
            self._index = {e.id: i for i, e in enumerate(self.elements)}
            element = self._indexed(element_id)
        return element

    def _indexed(self, element_id: str) -> Optional[Element]:
        position = self._index.get(element_id)
        if position is None or position >= len(self.elements):
            return None
        element = self.elements[position]
        return element if element.id == element_id else None

    @property
    def last_element(self) -> Optional[Element]:
        return self.elements[-1] if self.elements else None

    def is_selected(self, element_id: str) -> bool:
        return element_id in self.selection

    def marker_element_ids(self) -> Set[str]:
        """IDs whose control handles are shown: the selection, or the newest element."""
        if self.selection:
            live = {e.id for e in self.elements}
            return self.selection & live
        last = self.last_element
        return {last.id} if last else set()

    # ----- Mutations -----

    def add_point(self, gesture: PointerGesture) -> Element:
        """
        Append a new element from a completed placement gesture.

        A click creates a corner point; a drag creates a smooth point whose
        outgoing handle sits where the pointer was released.
        """
        point = gesture.start
        secondary = gesture.location if gesture.is_drag(self.drag_threshold) else None
        if self.grid is not None:
            point = snap_point(point, self.grid, self.snap_tolerance)
            if secondary is not None:
                secondary = snap_point(secondary, self.grid, self.snap_tolerance)
        element = Element(anchor=point, secondary_control_point=secondary)
        self.elements.append(element)
        logger.debug(f"Added element {element.id} at {element.anchor.to_tuple()}")
        return element

    def toggle_select(self, element_id: str, exclusive: bool):
        """Select exclusively, or toggle membership in the selection."""
        if exclusive:
            self.selection = {element_id}
        elif element_id in self.selection:
            self.selection.remove(element_id)
        else:
            self.selection.add(element_id)

    def clear_selection(self):
        """Drop the selection (a new placement gesture is starting)."""
        self.selection.clear()

    def move_selection(self, offset: Point, snap: bool):
        """Move every selected element by ``offset``."""
        grid = self.grid if snap else None
        for element in self.elements:
            if element.id in self.selection:
                element.move_by_offset(offset, grid, self.snap_tolerance)

    def move_by_direction(self, direction, amplified: bool = False):
        """
        Nudge the selection one step with the arrow keys.

        Nudges are exact and never snap to the grid. An unknown direction
        is ignored.
        """
        try:
            unit = _DIRECTION_OFFSETS[Direction(direction)]
        except (ValueError, KeyError):
            logger.debug(f"Ignoring unknown direction: {direction!r}")
            return
        step = self.nudge_step * (self.nudge_multiplier if amplified else 1.0)
        self.move_selection(Point(unit[0] * step, unit[1] * step), snap=False)

    def delete_selection(self):
        """Remove the selected elements and clear the selection."""
        if not self.selection:
            return
        before = len(self.elements)
        self.elements = [e for e in self.elements if e.id not in self.selection]
        logger.debug(f"Deleted {before - len(self.elements)} element(s)")
        self.selection.clear()

    # ----- Copies -----

    def copy(self) -> "Drawing":
        """Independent copy; element IDs are preserved."""
        return replace(
            self,
            elements=[e.copy() for e in self.elements],
            selection=set(self.selection),
        )

    def previewing(self, gesture: Optional[PointerGesture]) -> "Drawing":
        """A copy with a pending placement applied; ``self`` is untouched."""
        preview = self.copy()
        if gesture is not None:
            preview.add_point(gesture)
        return preview


__all__ = [
    "DEFAULT_GRID",
    "DRAG_THRESHOLD",
    "NUDGE_STEP",
    "NUDGE_MULTIPLIER",
    "PrimaryControlMode",
    "Direction",
    "Modifiers",
    "PrimaryControl",
    "Element",
    "PointerGesture",
    "Drawing",
]
