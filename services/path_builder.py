"""
Path builder.

Turns the ordered element list of a Drawing into draw commands
(move, line, quadratic curve, cubic curve). The same command list feeds
the canvas renderer and the code generator.

Segment type per adjacent pair (the first element only starts the path):
- previous element has an outgoing handle -> cubic curve
- current element has both handles        -> quadratic curve through
                                             its incoming handle
- otherwise                               -> straight line
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from models.drawing import Element
from models.geometry import Point


class CommandType(Enum):
    """Types of draw commands."""
    MOVE = "move"
    LINE = "line"
    QUAD_CURVE = "quad_curve"   # 1 control point
    CURVE = "curve"             # 2 control points


@dataclass(frozen=True)
class DrawCommand:
    """
    One step of path construction.

    Attributes:
        command_type: Kind of command
        to: End point of the command
        control1: Control point (quad) or first control point (cubic)
        control2: Second control point (cubic only)
    """
    command_type: CommandType
    to: Point
    control1: Optional[Point] = None
    control2: Optional[Point] = None

    @classmethod
    def move(cls, to: Point) -> "DrawCommand":
        return cls(CommandType.MOVE, to)

    @classmethod
    def line(cls, to: Point) -> "DrawCommand":
        return cls(CommandType.LINE, to)

    @classmethod
    def quad_curve(cls, to: Point, control: Point) -> "DrawCommand":
        return cls(CommandType.QUAD_CURVE, to, control)

    @classmethod
    def curve(cls, to: Point, control1: Point, control2: Point) -> "DrawCommand":
        return cls(CommandType.CURVE, to, control1, control2)

    def points(self) -> List[Point]:
        """Every point referenced by this command, end point last."""
        controls = [p for p in (self.control1, self.control2) if p is not None]
        return controls + [self.to]


def build_path(elements: Iterable[Element]) -> List[DrawCommand]:
    """
    Build draw commands for an ordered sequence of elements.

    Pure function of its input, safe to call on every repaint.

    Args:
        elements: Elements in traversal order

    Returns:
        List of draw commands, empty when there are no elements
    """
    commands: List[DrawCommand] = []
    previous_control: Optional[Point] = None

    for index, element in enumerate(elements):
        if index == 0:
            # The first element's outgoing handle does not shape the curve
            commands.append(DrawCommand.move(element.anchor))
            continue

        control_points = element.control_points
        if previous_control is not None:
            control2 = control_points[0] if control_points else element.anchor
            commands.append(DrawCommand.curve(element.anchor, previous_control, control2))
        elif control_points:
            commands.append(DrawCommand.quad_curve(element.anchor, control_points[0]))
        else:
            commands.append(DrawCommand.line(element.anchor))
        previous_control = element.secondary_control_point

    return commands


__all__ = [
    "CommandType",
    "DrawCommand",
    "build_path",
]
