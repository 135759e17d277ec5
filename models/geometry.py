"""
Geometry primitives for the path editor.

Points are immutable values in the canvas' local coordinate space
(x grows to the right, y grows downward). Everything the editor stores
is rounded to whole units so generated code and comparisons stay stable.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple


# Default snap tolerance in canvas units
SNAP_TOLERANCE = 10.0


# =============================================================================
# Helper Functions
# =============================================================================

def _round_half_away(value: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value) + 0.0


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class Point:
    """
    2D coordinate on the canvas.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate (grows downward)
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        """Store coordinates as floats."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def mirrored(self, about: "Point") -> "Point":
        """Reflect this point through ``about``."""
        relative = self - about
        return about - relative

    def rounded(self) -> "Point":
        """Round both coordinates to whole units."""
        return Point(_round_half_away(self.x), _round_half_away(self.y))

    def snapped(self, grid: "GridSize", tolerance: float = SNAP_TOLERANCE) -> "Point":
        """Snap each axis independently to the grid."""
        return Point(
            snap(self.x, grid.width, tolerance),
            snap(self.y, grid.height, tolerance),
        )

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class GridSize:
    """Grid spacing for snapping and the background overlay."""
    width: float = 50.0
    height: float = 50.0

    def to_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


# =============================================================================
# Functions
# =============================================================================

def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return a.distance_to(b)


def mirror(p: Point, about: Point) -> Point:
    """Reflect ``p`` through ``about``: ``about - (p - about)``."""
    return p.mirrored(about)


def snap(value: float, step: float, tolerance: float = SNAP_TOLERANCE) -> float:
    """
    Snap a single coordinate to a multiple of ``step``.

    The value only moves when it is strictly closer than ``tolerance`` to a
    multiple on either side; otherwise it is returned unchanged.

    Args:
        value: Coordinate to snap
        step: Grid spacing along this axis
        tolerance: Capture distance in canvas units

    Returns:
        The snapped (or untouched) coordinate
    """
    if step <= 0:
        return value
    # Python's modulo keeps the remainder in [0, step) for negative values too
    diff = value % step
    if diff < tolerance or step - diff < tolerance:
        return _round_half_away(value / step) * step
    return value


def snap_point(p: Point, grid: Optional[GridSize],
               tolerance: float = SNAP_TOLERANCE) -> Point:
    """Snap a point to the grid; a missing grid leaves it untouched."""
    if grid is None:
        return p
    return p.snapped(grid, tolerance)


def round_point(p: Point) -> Point:
    """Round a point to whole units."""
    return p.rounded()


__all__ = [
    "SNAP_TOLERANCE",
    "Point",
    "GridSize",
    "distance",
    "mirror",
    "snap",
    "snap_point",
    "round_point",
]
