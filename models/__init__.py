"""
Models package.

This package contains the data models for the path editor:
- Geometry primitives (Point, GridSize) and snapping helpers
- The editable curve (Element, PrimaryControl)
- The drawing (Drawing, PointerGesture, Direction, Modifiers)
"""

from .geometry import (
    SNAP_TOLERANCE,
    Point,
    GridSize,
    distance,
    mirror,
    snap,
    snap_point,
    round_point,
)
from .drawing import (
    DEFAULT_GRID,
    DRAG_THRESHOLD,
    NUDGE_STEP,
    NUDGE_MULTIPLIER,
    PrimaryControlMode,
    Direction,
    Modifiers,
    PrimaryControl,
    Element,
    PointerGesture,
    Drawing,
)


__all__ = [
    # Geometry
    "SNAP_TOLERANCE",
    "Point",
    "GridSize",
    "distance",
    "mirror",
    "snap",
    "snap_point",
    "round_point",
    # Drawing
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
