"""
Path code generator.

Generates source text that rebuilds the drawn path from its draw commands.
The text is shown read-only next to the canvas; it is never executed.
"""

from enum import Enum
from typing import List, Sequence

from models.geometry import Point
from services.path_builder import CommandType, DrawCommand


class CodeStyle(Enum):
    """Output dialects for generated path code."""
    SWIFTUI = "swiftui"   # SwiftUI Path builder block
    PYQT = "pyqt"         # PyQt6 QPainterPath statements


class PathCodeGenerator:
    """
    Generates path-construction code from draw commands.

    SwiftUI output looks like:

        Path { p in
            p.move(to: CGPoint(x: 0.0, y: 0.0))
            p.addLine(to: CGPoint(x: 100.0, y: 0.0))
        }

    PyQt output is plain Python building a QPainterPath.
    """

    INDENT = "    "

    def __init__(self, style: CodeStyle = CodeStyle.SWIFTUI):
        self.style = CodeStyle(style)

    def generate(self, commands: Sequence[DrawCommand]) -> str:
        """
        Generate code for a command sequence.

        Args:
            commands: Draw commands from the path builder

        Returns:
            Source text; an empty sequence yields an empty-path literal
        """
        if self.style == CodeStyle.PYQT:
            return self._generate_pyqt(commands)
        return self._generate_swiftui(commands)

    # ----- SwiftUI -----

    def _swift_point(self, p: Point) -> str:
        return f"CGPoint(x: {p.x!r}, y: {p.y!r})"

    def _swift_statement(self, command: DrawCommand) -> str:
        to = self._swift_point(command.to)
        if command.command_type == CommandType.MOVE:
            return f"p.move(to: {to})"
        if command.command_type == CommandType.LINE:
            return f"p.addLine(to: {to})"
        if command.command_type == CommandType.QUAD_CURVE:
            control = self._swift_point(command.control1)
            return f"p.addQuadCurve(to: {to}, control: {control})"
        control1 = self._swift_point(command.control1)
        control2 = self._swift_point(command.control2)
        return f"p.addCurve(to: {to}, control1: {control1}, control2: {control2})"

    def _generate_swiftui(self, commands: Sequence[DrawCommand]) -> str:
        if not commands:
            return "Path()"
        lines: List[str] = ["Path { p in"]
        for command in commands:
            lines.append(f"{self.INDENT}{self._swift_statement(command)}")
        lines.append("}")
        return "\n".join(lines)

    # ----- PyQt -----

    def _qt_point(self, p: Point) -> str:
        return f"QPointF({p.x!r}, {p.y!r})"

    def _qt_statement(self, command: DrawCommand) -> str:
        to = self._qt_point(command.to)
        if command.command_type == CommandType.MOVE:
            return f"path.moveTo({to})"
        if command.command_type == CommandType.LINE:
            return f"path.lineTo({to})"
        if command.command_type == CommandType.QUAD_CURVE:
            return f"path.quadTo({self._qt_point(command.control1)}, {to})"
        return (
            f"path.cubicTo({self._qt_point(command.control1)}, "
            f"{self._qt_point(command.control2)}, {to})"
        )

    def _generate_pyqt(self, commands: Sequence[DrawCommand]) -> str:
        lines: List[str] = ["path = QPainterPath()"]
        for command in commands:
            lines.append(self._qt_statement(command))
        return "\n".join(lines)


def generate_path_code(commands: Sequence[DrawCommand],
                       style: CodeStyle = CodeStyle.SWIFTUI) -> str:
    """
    Convenience function to generate path code.

    Args:
        commands: Draw commands from the path builder
        style: Output dialect

    Returns:
        Generated source text
    """
    generator = PathCodeGenerator(style)
    return generator.generate(commands)


__all__ = [
    "CodeStyle",
    "PathCodeGenerator",
    "generate_path_code",
]
