"""
Overlay geometry.

Computes what the canvas draws on top of the path: a marker for every
anchor, the control handles with their guide lines for the elements being
edited, and the background grid.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from models.drawing import Drawing
from models.geometry import GridSize, Point


@dataclass(frozen=True)
class ElementMarker:
    """
    Marker geometry for one element.

    Attributes:
        element_id: ID of the element
        anchor: Anchor handle position
        selected: Whether the element is selected
        control_points: (primary, secondary) handle positions, only for
            elements whose handles are shown
    """
    element_id: str
    anchor: Point
    selected: bool = False
    control_points: Optional[Tuple[Point, Point]] = None

    @property
    def shows_control_points(self) -> bool:
        return self.control_points is not None

    @property
    def guide_line(self) -> List[Point]:
        """Polyline primary -> anchor -> secondary, empty without handles."""
        if self.control_points is None:
            return []
        primary, secondary = self.control_points
        return [primary, self.anchor, secondary]


@dataclass(frozen=True)
class GridLine:
    """A grid guide line segment."""
    start: Point
    end: Point


def element_markers(drawing: Drawing) -> List[ElementMarker]:
    """
    Markers for all elements in traversal order.

    Control handles are included for selected elements, or for the most
    recently added element when nothing is selected.
    """
    handle_ids = drawing.marker_element_ids()
    markers = []
    for element in drawing.elements:
        control_points = element.control_points if element.id in handle_ids else None
        markers.append(ElementMarker(
            element_id=element.id,
            anchor=element.anchor,
            selected=drawing.is_selected(element.id),
            control_points=control_points,
        ))
    return markers


def grid_lines(grid: Optional[GridSize], width: float, height: float) -> List[GridLine]:
    """
    Horizontal and vertical guide lines covering ``width`` x ``height``.

    Lines start at the origin and repeat every grid step; nothing is
    returned without a grid or with a degenerate step.
    """
    if grid is None or grid.width <= 0 or grid.height <= 0:
        return []

    lines = []
    y = 0.0
    while y < height:
        lines.append(GridLine(Point(0, y), Point(width, y)))
        y += grid.height
    x = 0.0
    while x < width:
        lines.append(GridLine(Point(x, 0), Point(x, height)))
        x += grid.width
    return lines


__all__ = [
    "ElementMarker",
    "GridLine",
    "element_markers",
    "grid_lines",
]
