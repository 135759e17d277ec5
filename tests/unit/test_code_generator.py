"""
Unit tests for path code generation.

Tests:
- SwiftUI Path builder output
- PyQt QPainterPath output
- Empty paths
"""

import pytest
from models.geometry import Point
from services.code_generator import CodeStyle, PathCodeGenerator, generate_path_code
from services.path_builder import DrawCommand, build_path

from tests.conftest import assert_contains_all, assert_valid_python


@pytest.fixture
def mixed_commands():
    """One command of every kind."""
    return [
        DrawCommand.move(Point(10, 10)),
        DrawCommand.line(Point(100, 10)),
        DrawCommand.quad_curve(Point(100, 100), Point(150, 50)),
        DrawCommand.curve(Point(10, 100), Point(50, 150), Point(0, 120)),
    ]


class TestSwiftUIOutput:
    """Tests for the SwiftUI dialect."""

    def test_empty_path(self):
        assert generate_path_code([]) == "Path()"

    def test_single_move(self):
        code = generate_path_code([DrawCommand.move(Point(10, 10))])
        assert code == (
            "Path { p in\n"
            "    p.move(to: CGPoint(x: 10.0, y: 10.0))\n"
            "}"
        )

    def test_all_commands(self, mixed_commands):
        code = generate_path_code(mixed_commands, CodeStyle.SWIFTUI)
        assert_contains_all(code, [
            "p.move(to: CGPoint(x: 10.0, y: 10.0))",
            "p.addLine(to: CGPoint(x: 100.0, y: 10.0))",
            "p.addQuadCurve(to: CGPoint(x: 100.0, y: 100.0), "
            "control: CGPoint(x: 150.0, y: 50.0))",
            "p.addCurve(to: CGPoint(x: 10.0, y: 100.0), "
            "control1: CGPoint(x: 50.0, y: 150.0), control2: CGPoint(x: 0.0, y: 120.0))",
        ])

    def test_one_statement_per_command(self, mixed_commands):
        lines = generate_path_code(mixed_commands).splitlines()
        assert lines[0] == "Path { p in"
        assert lines[-1] == "}"
        assert len(lines) == len(mixed_commands) + 2
        assert all(line.startswith(PathCodeGenerator.INDENT + "p.") for line in lines[1:-1])

    def test_negative_coordinates(self):
        code = generate_path_code([DrawCommand.move(Point(-5, -12))])
        assert "CGPoint(x: -5.0, y: -12.0)" in code

    def test_from_elements(self, curve_drawing):
        code = generate_path_code(build_path(curve_drawing.elements))
        assert code.count("p.move(") == 1
        assert code.count("p.addQuadCurve(") == 1
        assert code.count("p.addCurve(") == 1


class TestPyQtOutput:
    """Tests for the PyQt dialect."""

    def test_empty_path(self):
        code = generate_path_code([], CodeStyle.PYQT)
        assert code == "path = QPainterPath()"
        assert_valid_python(code)

    def test_all_commands(self, mixed_commands):
        code = generate_path_code(mixed_commands, CodeStyle.PYQT)
        assert code.splitlines() == [
            "path = QPainterPath()",
            "path.moveTo(QPointF(10.0, 10.0))",
            "path.lineTo(QPointF(100.0, 10.0))",
            "path.quadTo(QPointF(150.0, 50.0), QPointF(100.0, 100.0))",
            "path.cubicTo(QPointF(50.0, 150.0), QPointF(0.0, 120.0), QPointF(10.0, 100.0))",
        ]

    def test_valid_python(self, mixed_commands):
        assert_valid_python(generate_path_code(mixed_commands, CodeStyle.PYQT))


class TestGenerator:
    """Tests for PathCodeGenerator itself."""

    def test_style_from_string(self):
        assert PathCodeGenerator("pyqt").style == CodeStyle.PYQT

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            PathCodeGenerator("svg")

    def test_deterministic(self, mixed_commands):
        generator = PathCodeGenerator()
        assert generator.generate(mixed_commands) == generator.generate(mixed_commands)
