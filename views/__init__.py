"""Views package."""

from .drawing_canvas import DrawingCanvas, to_painter_path
from .code_view import CodeView, PathCodeHighlighter
from .main_window import MainWindow

__all__ = [
    "DrawingCanvas",
    "to_painter_path",
    "CodeView",
    "PathCodeHighlighter",
    "MainWindow",
]
